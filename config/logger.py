import json
import logging
import sys
import traceback
from datetime import datetime


class JSONFormatter(logging.Formatter):
	"""
	Formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.now().isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		return json.dumps(log_entry, ensure_ascii=False, default=str)


def configure_logging(level: str = 'INFO', json_logs: bool = False) -> None:
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

	logging.getLogger('httpx').setLevel(logging.WARNING)
	logging.getLogger('openai').setLevel(logging.WARNING)

	handler = logging.StreamHandler(sys.stdout)
	if json_logs:
		handler.setFormatter(JSONFormatter())
	else:
		console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
		handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
	root_logger.addHandler(handler)
