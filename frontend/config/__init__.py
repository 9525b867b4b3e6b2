import os

# --- DYNAMIC PATH CONFIGURATION ---
# frontend/config/__init__.py -> parent is config -> parent is frontend -> parent is project root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
FRONTEND_DIR = os.path.join(BASE_DIR, "frontend")

# --- BACKEND SERVICE ---
API_URL = os.environ.get("REFINED_STACK_API_URL", "http://localhost:8000")
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "30"))

# --- DOCUMENT ENCRYPTION ---
# Name of the env var holding the Fernet key (see saas_core.auth.security.generate_key)
DOCUMENT_ENC_KEY_VAR = "DOCUMENT_ENC_KEY"

# --- UI ---
APP_NAME = "Refined Stack Co."
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
