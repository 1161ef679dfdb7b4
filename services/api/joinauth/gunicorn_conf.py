# gunicorn -c joinauth/gunicorn_conf.py joinauth.main:app
import multiprocessing
import logging
import os

host = os.getenv('UVICORN_HOST', '0.0.0.0')
port = os.getenv('UVICORN_PORT', '8000')
bind = f"{host}:{port}"

#bcrypt runs in worker threads, so processes are mostly waiting on the database
workers = int(os.getenv('WEB_CONCURRENCY') or max(2, multiprocessing.cpu_count()))
worker_class = "uvicorn.workers.UvicornWorker"

loglevel = os.getenv('GUNICORN_LOG_LEVEL', 'info')
accesslog = None
errorlog = "-"

timeout = int(os.getenv('GUNICORN_TIMEOUT', '30'))
graceful_timeout = timeout
keepalive = 5
reload = False


class DropUnclosedConnectionWarnings(logging.Filter):
    '''aiomysql pools report every connection still open when a worker is recycled'''
    def filter(self, record):
        return not record.getMessage().startswith("Unclosed connection")


def post_fork(server, worker):
    logging.getLogger("asyncio").addFilter(DropUnclosedConnectionWarnings())
    server.log.info(f"[GUNICORN] Worker {worker.pid} serving {bind}")
