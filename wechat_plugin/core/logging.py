"""
调试日志
"""
import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s][%(levelname)s] %(message)s"


def create_debug_logger(log_file_path: Optional[str] = None) -> Optional[logging.Logger]:
    """
    根据日志文件路径创建调试日志对象
    
    Args:
        log_file_path: 日志文件路径，为None时不写入日志
    
    Returns:
        logging.Logger: 写入该文件的日志对象，未配置路径时返回None
    """
    if not log_file_path:
        return None
    
    # 同一文件只挂一个handler，避免重复写入
    logger = logging.getLogger(f"wechat_plugin.debug.{log_file_path}")
    if not logger.handlers:
        handler = logging.FileHandler(log_file_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
    
    return logger
