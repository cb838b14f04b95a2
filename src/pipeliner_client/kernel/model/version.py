"""Entity types available in each team pipeline API version."""

from __future__ import annotations

EARLIEST_VERSION = 9
LATEST_VERSION = 15

# Each version lists the entity types it adds (singular -> collection name)
# and the ones it removes, relative to the previous version.
_CHANGES: dict[int, dict[str, dict[str, str] | frozenset[str]]] = {
    9: {
        "add": {
            "Account": "Accounts",
            "AccountType": "AccountTypes",
            "Activity": "Activities",
            "ActivityType": "ActivityTypes",
            "Appointment": "Appointments",
            "Client": "Clients",
            "Contact": "Contacts",
            "Currency": "Currencies",
            "Data": "Data",
            "Document": "Documents",
            "ExchangeRateList": "ExRateLists",
            "Industry": "Industries",
            "IntegrationEnvironment": "IntegrationEnvs",
            "Lead": "Leads",
            "MasterRight": "MasterRights",
            "Message": "Messages",
            "Note": "Notes",
            "Opportunity": "Opportunities",
            "Product": "Products",
            "ReasonOfClose": "ReasonOfCloses",
            "Reminder": "Reminders",
            "SalesUnit": "SalesUnits",
            "Stage": "Stages",
        },
    },
    11: {
        "add": {
            "Competence": "Competencies",
            "Relevance": "Relevancies",
        },
    },
    12: {
        "add": {
            "Email": "Emails",
        },
    },
    14: {
        "add": {
            "AddressbookRelation": "AddressbookRelations",
            "OpptyAccountRelation": "OpptyAccountRelations",
            "OpptyContactRelation": "OpptyContactRelations",
            "OpptyProductRelation": "OpptyProductRelations",
            "ProductCategory": "ProductCategories",
            "ProductPriceList": "ProductPriceLists",
            "ProductPriceListPrice": "ProductPriceListPrices",
        },
    },
    15: {
        "add": {
            "OpptyContactRole": "OpptyContactRoles",
            "SalesRole": "SalesRoles",
        },
        "remove": frozenset({"Competence", "Relevance"}),
    },
}


def get_entity_types(version: int) -> dict[str, str]:
    """Return ``{entity name: collection name}`` for the given API *version*.

    Versions above :data:`LATEST_VERSION` get the latest known table.
    """
    entity_types: dict[str, str] = {}
    for step in range(EARLIEST_VERSION, min(LATEST_VERSION, version) + 1):
        changes = _CHANGES.get(step)
        if changes is None:
            continue
        added = changes.get("add")
        if isinstance(added, dict):
            entity_types.update(added)
        for name in changes.get("remove", frozenset()):
            entity_types.pop(name, None)
    return entity_types


__all__ = ["EARLIEST_VERSION", "LATEST_VERSION", "get_entity_types"]
