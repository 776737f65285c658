"""
日志配置
"""
import logging
from typing import Optional


LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """配置日志系统 - 同时输出到控制台和文件"""
    log_level = getattr(logging, level.upper(), logging.INFO)

    # 创建根日志器
    logger = logging.getLogger()
    logger.setLevel(log_level)

    # 清除已有处理器
    logger.handlers.clear()

    # 格式器 - 不记录敏感信息
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 控制台处理器
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 文件处理器
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
