"""
配置管理 - 所有敏感信息通过环境变量读取

Kraken 配置说明：
- KRAKEN_API_KEY: Kraken 控制台生成的 API Key
- KRAKEN_API_SECRET: 对应的 Private Key (Base64 格式)
- KRAKEN_OTP: 两步验证密码 (可选，仅当 API Key 开启了 2FA)
"""
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置"""

    # ==================== Kraken 配置 ====================
    # API 地址和版本固定为 https://api.kraken.com/0，不可配置
    KRAKEN_API_KEY: str = ""
    KRAKEN_API_SECRET: str = ""
    KRAKEN_OTP: Optional[str] = None

    # 请求超时 (秒)
    KRAKEN_TIMEOUT_SECONDS: float = 5.0

    # 连接策略
    # False = 每个请求新建连接
    KRAKEN_KEEP_ALIVE: bool = False
    # 代理 (可选): http://127.0.0.1:7890 或 socks5://127.0.0.1:1080
    KRAKEN_PROXY: str = ""

    # 日志配置
    LOG_FILE: str = ""       # 日志文件路径 (空 = 只输出到控制台)
    LOG_LEVEL: str = "INFO"  # 日志级别

    @field_validator('KRAKEN_OTP', mode='before')
    @classmethod
    def parse_otp(cls, v):
        """处理空字符串的情况"""
        if v == '' or v is None:
            return None
        return str(v)

    @field_validator('KRAKEN_TIMEOUT_SECONDS', mode='before')
    @classmethod
    def parse_timeout(cls, v):
        """处理空字符串的情况"""
        if v == '' or v is None:
            return 5.0
        return float(v)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
