# Gunicorn configuration
# Run with: gunicorn -c deploy/gunicorn.conf.py "codetrack:create_app('production')"
import multiprocessing

bind = "127.0.0.1:8000"
workers = multiprocessing.cpu_count() * 2 + 1
worker_class = "sync"
timeout = 60
keepalive = 5
errorlog = "/var/log/codetrack/gunicorn-error.log"
accesslog = "/var/log/codetrack/gunicorn-access.log"
loglevel = "info"
