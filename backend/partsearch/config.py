import os

# -------------------------------
# Outbound fetch settings
# -------------------------------
REQUEST_TIMEOUT = float(os.getenv("PARTSEARCH_REQUEST_TIMEOUT", "10"))
MAX_REDIRECTS = int(os.getenv("PARTSEARCH_MAX_REDIRECTS", "5"))
MAX_RESULTS_PER_SITE = int(os.getenv("PARTSEARCH_MAX_RESULTS_PER_SITE", "10"))

REQUEST_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
}

# -------------------------------
# API settings
# -------------------------------
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
LOG_LEVEL = os.getenv("PARTSEARCH_LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PARTSEARCH_CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# Vendor sites offered to the frontend before the user adds their own
DEFAULT_WEBSITES = [
    site.strip()
    for site in os.getenv(
        "PARTSEARCH_DEFAULT_WEBSITES",
        "https://www.digikey.com,https://www.mouser.com,https://www.newark.com",
    ).split(",")
    if site.strip()
]
