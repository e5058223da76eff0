# backend/cluemart_api/main.py

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from .api import subscribe
from .core.config import settings
from .core.errors import NotConfigured, SubscriptionError
from .core.logging_config import setup_logging

app = FastAPI(
    title="ClueMart Beta Signup Service",
    description="ClueMart 落地页的订阅后端，把报名邮箱转发到 Mailchimp。",
    version="1.0.0"
)

# 挂载 API 路由
app.include_router(subscribe.router, prefix="/api", tags=["Subscribe"])


@app.exception_handler(SubscriptionError)
async def subscription_error_handler(request: Request, exc: SubscriptionError):
    # 只返回固定的公开信息，Mailchimp 的原始错误只写入日志
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


@app.on_event("startup")
def startup_event():
    """应用启动时初始化日志系统并检查 Mailchimp 配置"""
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Application startup sequence initiated.")

    try:
        settings.mailchimp.validate()
        logger.info(f"Mailchimp forwarding enabled (server prefix: {settings.mailchimp.server_prefix}).")
    except NotConfigured as e:
        logger.critical(f"{e.detail}. /api/subscribe will answer 500 until the .env file is fixed.")

    logger.info("Application startup sequence completed.")


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Welcome to the ClueMart Beta signup API. Visit /docs for API documentation."}
