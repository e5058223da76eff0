# backend/cluemart_api/core/logging_config.py

import logging
import logging.config
import os

from .config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_logging_config(log_file_path: str, level: str = "INFO") -> dict:
    """
    订阅服务的日志配置：
    - console / signup_file 记录 cluemart_api 自身在 ``level`` 及以上的日志；
    - provider_errors 文件只收 ERROR，用于排查 Mailchimp 拒绝或不可达的请求；
    - uvicorn 访问日志和 httpx 的逐请求日志压到 WARNING。
    """
    file_handler = {
        'class': 'logging.handlers.RotatingFileHandler',
        'formatter': 'default',
        'maxBytes': 1024 * 1024 * 5,  # 5 MB
        'backupCount': 5,
        'encoding': 'utf-8',
    }
    error_file_path = os.path.splitext(log_file_path)[0] + '_errors.log'

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {'format': LOG_FORMAT, 'datefmt': '%Y-%m-%d %H:%M:%S'},
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'stream': 'ext://sys.stdout',
            },
            'signup_file': dict(file_handler, filename=log_file_path),
            'provider_errors': dict(file_handler, filename=error_file_path, level='ERROR'),
        },
        'loggers': {
            'cluemart_api': {
                'handlers': ['console', 'signup_file', 'provider_errors'],
                'level': level,
                'propagate': False,
            },
            'uvicorn.error': {
                'handlers': ['console', 'signup_file'],
                'level': 'INFO',
                'propagate': False,
            },
            'uvicorn.access': {
                'handlers': ['console'],
                'level': 'WARNING',
                'propagate': False,
            },
            'httpx': {'level': 'WARNING'},
        },
        'root': {'handlers': ['console'], 'level': 'WARNING'},
    }


def setup_logging(log_dir: str = None, level: str = None):
    """
    在应用启动时初始化日志系统，返回主日志文件路径 (logs/cluemart_backend.log)。
    """
    log_dir = log_dir or settings.log_dir
    os.makedirs(log_dir, exist_ok=True)
    log_file_path = os.path.join(log_dir, 'cluemart_backend.log')

    logging.config.dictConfig(build_logging_config(log_file_path, level or settings.log_level))
    logger = logging.getLogger('cluemart_api')
    logger.info(f"Signup service logging initialized, writing to {log_file_path}")
    return log_file_path


def mask_email(email: str) -> str:
    """Shortens the local part of an address for log lines: alice@x.com -> a***@x.com."""
    if not isinstance(email, str) or "@" not in email:
        return "<invalid>"
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"
