"""Permission scopes an addon may request through its api section."""

from enum import Enum


class Scopes(str, Enum):
    """Host API permission scopes.

    Each resource exposes ``all``, ``read``, ``write`` and ``delete`` scopes.
    """

    ACCOUNTS_ALL = "accounts.all"
    ACCOUNTS_READ = "accounts.read"
    ACCOUNTS_WRITE = "accounts.write"
    ACCOUNTS_DELETE = "accounts.delete"
    CALLS_ALL = "calls.all"
    CALLS_READ = "calls.read"
    CALLS_WRITE = "calls.write"
    CALLS_DELETE = "calls.delete"
    CALL_DISPOSITIONS_ALL = "callDispositions.all"
    CALL_DISPOSITIONS_READ = "callDispositions.read"
    CALL_DISPOSITIONS_WRITE = "callDispositions.write"
    CALL_DISPOSITIONS_DELETE = "callDispositions.delete"
    EVENTS_ALL = "events.all"
    EVENTS_READ = "events.read"
    EVENTS_WRITE = "events.write"
    EVENTS_DELETE = "events.delete"
    MAILBOXES_ALL = "mailboxes.all"
    MAILBOXES_READ = "mailboxes.read"
    MAILBOXES_WRITE = "mailboxes.write"
    MAILBOXES_DELETE = "mailboxes.delete"
    MAILINGS_ALL = "mailings.all"
    MAILINGS_READ = "mailings.read"
    MAILINGS_WRITE = "mailings.write"
    MAILINGS_DELETE = "mailings.delete"
    OPPORTUNITIES_ALL = "opportunities.all"
    OPPORTUNITIES_READ = "opportunities.read"
    OPPORTUNITIES_WRITE = "opportunities.write"
    OPPORTUNITIES_DELETE = "opportunities.delete"
    OPPORTUNITY_STAGES_ALL = "opportunityStages.all"
    OPPORTUNITY_STAGES_READ = "opportunityStages.read"
    OPPORTUNITY_STAGES_WRITE = "opportunityStages.write"
    OPPORTUNITY_STAGES_DELETE = "opportunityStages.delete"
    PROSPECTS_ALL = "prospects.all"
    PROSPECTS_READ = "prospects.read"
    PROSPECTS_WRITE = "prospects.write"
    PROSPECTS_DELETE = "prospects.delete"
    SEQUENCES_ALL = "sequences.all"
    SEQUENCES_READ = "sequences.read"
    SEQUENCES_WRITE = "sequences.write"
    SEQUENCES_DELETE = "sequences.delete"
    SEQUENCE_STATES_ALL = "sequenceStates.all"
    SEQUENCE_STATES_READ = "sequenceStates.read"
    SEQUENCE_STATES_WRITE = "sequenceStates.write"
    SEQUENCE_STATES_DELETE = "sequenceStates.delete"
    STAGES_ALL = "stages.all"
    STAGES_READ = "stages.read"
    STAGES_WRITE = "stages.write"
    STAGES_DELETE = "stages.delete"
    TASKS_ALL = "tasks.all"
    TASKS_READ = "tasks.read"
    TASKS_WRITE = "tasks.write"
    TASKS_DELETE = "tasks.delete"
    TEMPLATES_ALL = "templates.all"
    TEMPLATES_READ = "templates.read"
    TEMPLATES_WRITE = "templates.write"
    TEMPLATES_DELETE = "templates.delete"
    USERS_ALL = "users.all"
    USERS_READ = "users.read"
    USERS_WRITE = "users.write"
    USERS_DELETE = "users.delete"
    WEBHOOKS_ALL = "webhooks.all"
    WEBHOOKS_READ = "webhooks.read"
    WEBHOOKS_WRITE = "webhooks.write"
    WEBHOOKS_DELETE = "webhooks.delete"
