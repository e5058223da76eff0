# backend/cluemart_api/core/config.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .errors import NotConfigured

# 加载 backend/.env 中的环境变量，已存在的进程环境变量优先
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '..', '.env')
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class MailchimpSettings:
    """Credentials and endpoint parts for the Mailchimp member-creation API."""
    api_key: str = ""
    audience_id: str = ""
    server_prefix: str = ""
    request_timeout: float = 10.0

    @property
    def is_configured(self) -> bool:
        return all([self.api_key, self.audience_id, self.server_prefix])

    @property
    def members_url(self) -> str:
        return (
            f"https://{self.server_prefix}.api.mailchimp.com/3.0"
            f"/lists/{self.audience_id}/members"
        )

    def validate(self) -> "MailchimpSettings":
        """Raises NotConfigured when one of the required values is empty."""
        if not self.is_configured:
            missing = [
                name for name, value in (
                    ("MAILCHIMP_API_KEY", self.api_key),
                    ("MAILCHIMP_AUDIENCE_ID", self.audience_id),
                    ("MAILCHIMP_SERVER_PREFIX", self.server_prefix),
                ) if not value
            ]
            raise NotConfigured(f"Missing Mailchimp settings: {', '.join(missing)}")
        return self


class Settings:
    """
    应用配置类，从环境变量中读取配置。
    不使用 Pydantic，手动进行类型转换和默认值设置。
    """

    def __init__(self, mailchimp: MailchimpSettings, log_dir: str, log_level: str = "INFO"):
        self.mailchimp = mailchimp
        self.log_dir = log_dir
        self.log_level = log_level

    @classmethod
    def from_env(cls) -> "Settings":
        mailchimp = MailchimpSettings(
            api_key=os.getenv("MAILCHIMP_API_KEY", "").strip(),
            audience_id=os.getenv("MAILCHIMP_AUDIENCE_ID", "").strip(),
            server_prefix=os.getenv("MAILCHIMP_SERVER_PREFIX", "").strip(),
            request_timeout=float(os.getenv("MAILCHIMP_REQUEST_TIMEOUT") or 10),
        )
        default_log_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', '..', 'logs')
        return cls(
            mailchimp=mailchimp,
            log_dir=os.getenv("LOG_DIR") or default_log_dir,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )


# 创建一个全局配置实例，进程启动时构建一次
settings = Settings.from_env()


def get_mailchimp_settings() -> MailchimpSettings:
    """FastAPI dependency handing the process-wide Mailchimp settings to routes."""
    return settings.mailchimp
