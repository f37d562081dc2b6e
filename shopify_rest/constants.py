"""
Constants and configurations for the Shopify REST client.
"""

# API Configuration
SHOPIFY_DOMAIN = ".myshopify.com"
ADMIN_PATH = "/admin"
RESPONSE_FORMAT = ".json"
REQUEST_TIMEOUT = 30  # seconds

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")

# Characters that change meaning inside URL userinfo
UNSAFE_CREDENTIAL_CHARS = "%/#@?"

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Environment variable names
ENV_STORE = "SHOPIFY_STORE"
ENV_API_KEY = "SHOPIFY_API_KEY"
ENV_PASSWORD = "SHOPIFY_PASSWORD"
ENV_REQUEST_TIMEOUT = "SHOPIFY_REQUEST_TIMEOUT"
ENV_LOG_LEVEL = "LOG_LEVEL"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Common error messages
ERROR_MESSAGES = {
    'empty_store': 'Store name cannot be empty',
    'empty_api_key': 'API key cannot be empty',
    'empty_password': 'Password cannot be empty',
    'invalid_store': 'Store must be a bare myshopify subdomain',
    'unsafe_credential': 'Credential contains characters not allowed in a URL (% / # @ ?)',
    'unsupported_method': 'Unsupported HTTP method',
    'serialization_failed': 'Failed to serialize request body to JSON',
    'connection_failed': 'Failed to connect to Shopify API',
    'invalid_json': 'Response body is not valid JSON',
}
