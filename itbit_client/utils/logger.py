import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


class RequestLogger:
    """请求日志记录类: one line per itBit request outcome"""

    def __init__(self, log_dir="logs", log_name="itbit_requests"):
        """
        初始化请求日志记录器

        Args:
            log_dir: 日志目录
            log_name: 日志文件名前缀
        """
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        self.log_file = (log_path / f"{log_name}.log").resolve()

        # one logger per log file, so two directories never share a handler
        self.logger = logging.getLogger(f"itbit_client.requests.{self.log_file}")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # 避免重复添加handler
        if not self.logger.handlers:
            # 日志格式: 时间|方法|URL|nonce|状态码|结果
            formatter = logging.Formatter(
                '%(asctime)s|%(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

            # 按天轮转的文件处理器,保留90天
            handler = TimedRotatingFileHandler(
                filename=self.log_file,
                when='midnight',
                interval=1,
                backupCount=90,
                encoding='utf-8'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_request(self, method: str, uri: str, nonce=None, status=None, outcome: str = "OK"):
        """
        记录一次请求的结果

        Args:
            method: HTTP method
            uri: full request url
            nonce: nonce of a signed request, None for public calls
            status: HTTP status code, None when nothing was received
            outcome: 'OK' or the ErrorKind value of the failure
        """
        log_message = (
            f"{method}|"
            f"{uri}|"
            f"{'' if nonce is None else nonce}|"
            f"{'' if status is None else status}|"
            f"{outcome}"
        )
        self.logger.info(log_message)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
