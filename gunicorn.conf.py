import os

# Bind to the port provided via the PORT environment variable, defaulting to
# 5000.
bind = f"0.0.0.0:{os.getenv('PORT', '5000')}"

# Requests are short form posts; plain sync workers are enough.
worker_class = "sync"
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
timeout = 30

# With more than one worker the default SimpleCache is per process, so set
# CACHE_TYPE=RedisCache and CACHE_REDIS_URL to share view invalidation.
accesslog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
