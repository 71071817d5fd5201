"""User-facing messages and table layout constants."""

CREATE_NEW_WORKSPACE = "Create new workspace "
EDIT_WORKSPACE = "Edit workspace "
ENTER_USERNAME = "Jira username/email: "
ENTER_JIRA_URL = "Jira URL: "
ENTER_JIRA_URL_EXAMPLE = "[ex. https://my-jira.atlassian.net]: "
SELECT_WORKSPACE = "Select workspace or ESC to cancel"
SELECT_WORKSPACE_SUCCESS = "Workspace has been successfully switched to %s"
QUESTION_MARK = "? "
ENTER_JIRA_CREDENTIAL = "Jira Api Token: "
CHOOSE_JIRA_AUTH_KIND = "Jira Token Type: "
ENTER_JIRA_AUTH_KIND_NUMBER = "Enter a number (Default is 1): "
PROJECT_LABEL = "Project: "
ISSUE_LABEL = "Issue: "
LABEL_STATUS = "Status: "
TYPE_STATUS = "Type: "
LABEL_ASSIGNEE = "Assignee: "
LABEL_LABEL = "Label: "
LABEL_REPORTER = "Reporter: "
JQL_LABEL = "JQL: "
SEARCH_ISSUES_LOADING = "Fetching"
SEARCH_LABELS_LOADING = "Fetching"
SEARCH_BOARDS_LOADING = "Fetching"
SELECT_ISSUE = "Select issue or ESC to cancel"
SELECT_USER = "Select user or ESC to cancel"
SELECT_LABEL = "Select label or ESC to cancel"
SELECT_BOARD = "Select board or ESC to cancel"
SELECT_FILTER = "Select filter or ESC to cancel"
SEARCH_PROJECTS_LOADING = "Fetching projects"
SELECT_PROJECT = "Select project or ESC to exit"
CHANGING_ASSIGNEE_TO = "Are you sure about changing %s assignee to [%s]?"
CANNOT_ASSIGN_USER = "Cannot assign user %s to ticket %s. Reason: %s AccountId: %s"
CANNOT_ADD_LABEL = "Cannot add label %s to ticket %s. Reason: %s"
CANNOT_ADD_COMMENT = "Cannot add comment to ticket %s. Reason: %s"
ASSIGN_SUCCESS = "User %s has been successfully assigned to issue %s."
ADD_LABEL_SUCCESS = "Label %s has been successfully added to issue %s."
COMMENT_SUCCESS = "Comment has been successfully added to issue %s."
USERS_FUZZY_FIND = "Select new assignee or ESC to cancel"
LABEL_FUZZY_FIND = "Select existing label or type new one or ESC to cancel"
CANNOT_FIND_STATUS_FOR_COLUMN = "Cannot find valid transition status."
ASSIGNING_USER = "Assigning user"
ADDING_LABEL = "Adding label"
ADDING_COMMENT = "Adding comment"
UNASSIGNED = "Unassigned"
CHANGING_STATUS_TO = "Are you sure about changing %s status to [%s]?"
STATUS_FUZZY_FIND = "Select status or ESC to cancel"
CHANGING_STATUS = "Changing status"
CHANGE_STATUS_SUCCESS = "Status for issue %s has been successfully changed to %s."
ALL = "All"
TYPE_COMMENT_AND_SAVE = "Type new comment, and press F1 to save:"
TYPE_JQL_AND_SAVE = "Type new JQL, and press F1 to save:"
SUMMARY = "Summary"
DESCRIPTION = "Description"
LABELS = "Labels"
CHANGE_STATUS = "Change status "
BY_STATUS = "by status "
BY_ASSIGNEE = "by assignee "
BY_LABEL = "by label "
BOARDS = "boards"
ASSIGN_USER = "Assign user "
COMMENT = "Comment "
LABEL = "Label "
YES = "Yes "
OPEN = "Open "
SAVE = "Save "
SCROLL = "Scroll "
NAVIGATE = "Navigate "
MOVE_ISSUE = "Move issue "
SELECT = "Select "
UNSELECT = "Unselect "
NEW = "New "
DELETE = "Delete "
JQL_FUZZY_FIND = "Select or type new jql or ESC to cancel"
JQL_ADD_NEW = "Are you sure about adding a new JQL [%s] ?"
JQL_REMOVE_CONFIRM = "Do you really want to remove JQL [%s] ?"
CANNOT_ADD_NEW_JQL = "Cannot add new jql. Reason: %s"
JQL_ADD_SUCCESS = "New JQL has been successfully added to your workspace."
JQL_REMOVE_SUCCESS = "JQL has been successfully removed from your workspace."
CUSTOM_JQL = "Custom JQL"

TABLE_COLUMN_PADDING = 2
MAX_SUMMARY_COL_WIDTH = 45
MAX_STATUS_COL_WIDTH = 12