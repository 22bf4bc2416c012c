"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ORGANIZATION_NAME = "Organization"

NO_SUPERVISOR_LABEL = "None"
NOT_APPLICABLE_LABEL = "Not Applicable"
LABEL_SEPARATOR = ", "

SESSION_EXPANDED_KEY = "org_hierarchy_expanded"
SESSION_SNAPSHOT_KEY = "org_hierarchy_snapshot"
