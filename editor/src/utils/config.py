"""Configuration file handling for RunSnap

Settings live in ~/.runsnap/config.json (or the file named by the
RUNSNAP_CONFIG environment variable). Only presentation defaults are
stored here; edits to a story are never persisted.
"""

import json
import logging
import os

from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, CONFIG_ENV_VAR,
	DEFAULT_DATE_FORMAT, JPEG_QUALITY,
)
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
	'font_path': None,
	'bold_font_path': None,
	'date_format': DEFAULT_DATE_FORMAT,
	'jpeg_quality': JPEG_QUALITY,
	'show_emojis': True,
	'default_filter': 'none',
}


def get_config_path():
	"""Path of the config file (environment override first)"""
	override = os.environ.get(CONFIG_ENV_VAR)
	if override:
		return override
	return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def load_config(path=None):
	"""Load settings merged over the defaults

	A missing file gives the defaults. A malformed file is logged and
	ignored; unknown keys are dropped.
	"""
	path = path or get_config_path()
	config = dict(DEFAULT_CONFIG)
	if not os.path.exists(path):
		return config

	try:
		with open(path, 'r', encoding='utf-8') as f:
			stored = json.load(f)
	except (OSError, ValueError) as e:
		logger.warning("Ignoring unreadable config %s: %s", path, e)
		return config

	if not isinstance(stored, dict):
		logger.warning("Ignoring config %s: expected a JSON object", path)
		return config

	for key in DEFAULT_CONFIG:
		if key in stored:
			config[key] = stored[key]
	return config


def save_config(config, path=None):
	"""Save settings, creating the config directory if needed"""
	path = path or get_config_path()
	try:
		directory = os.path.dirname(path)
		if directory:
			os.makedirs(directory, exist_ok=True)
		data = {key: config.get(key, default) for key, default in DEFAULT_CONFIG.items()}
		with open(path, 'w', encoding='utf-8') as f:
			json.dump(data, f, indent=2)
	except OSError as e:
		loggerRaise(e, "Error saving config")
	return path
