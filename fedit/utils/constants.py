APP_ORG = "QuickTools"
APP_NAME = "Format Editor"
CONFIG_APP_DIR = "FormatEditor"

NOTIFICATION_TITLE = "Text Editor Notification"

# Notifications raised while editing
MSG_REMOVED_WORDS = "Removed {count} words."
MSG_AUTOSAVED = "File updated with new paragraph."
MSG_AUTOSAVE_ERROR = "Error during autosave: {error}"

# Blocking messages for explicit open/save
MSG_UNSUPPORTED = "Unsupported file format"
MSG_LOAD_ERROR = "Error loading file: {error}"
MSG_OPEN_FIRST = "Please open a file first"
MSG_CONFIRM_SAVE = "Are you sure you want to save to {name}?"
MSG_SAVED = "File saved successfully"
MSG_SAVE_ERROR = "Error saving file: {error}"

HTML_DOCUMENT = "<!DOCTYPE html>\n<html>\n<body>\n<p>{body}</p>\n</body>\n</html>"
