import configparser
import logging
import os


def setup_logger(name: str = 'techsupport', config_path: str = 'config.ini') -> logging.Logger:
    """Sets up the package logger to write to a file under the configured log_dir."""
    config = configparser.ConfigParser()
    config.read(config_path)
    settings = config['logging'] if config.has_section('logging') else {}
    log_dir = settings.get('log_dir', 'logs')
    level = settings.get('level', 'INFO')

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    log_path = os.path.join(log_dir, f"{name}.log")
    handler = logging.FileHandler(log_path, mode='a')
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    if not logger.handlers:
        logger.addHandler(handler)
    return logger
