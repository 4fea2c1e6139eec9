"""
Posty5 API constants shared by every node in the pack.
"""

NODE_TYPE_PREFIX = "n8n-nodes-posty5"

CREDENTIAL_NAME = "posty5Api"
API_KEY_HEADER = "X-API-Key"

# Provenance tag added to every POST body
CREATED_FROM = "n8n"

# Endpoints
SHORT_LINK = "/api/short-link"
QR_CODE = "/api/qr-code"
HTML_HOSTING = "/api/html-hosting"
HTML_HOSTING_VARIABLES = "/api/html-hosting-variables"
FORM_SUBMISSION = "/api/html-hosting-form-submission"
SOCIAL_PUBLISHER_WORKSPACE = "/api/social-publisher-workspace"
SOCIAL_PUBLISHER_TASK = "/api/social-publisher-task"
SOCIAL_PUBLISHER_POST = "/api/social-publisher-post"

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100
