"""Colored logging for the engine and the deploy scripts.

``LOG_LEVEL`` picks the level (WARNING when unset) and ``LOG_DIR``, when set,
adds plain and colored log files next to the console output. Loggers also get
``tx``, ``deploy`` and ``revert`` methods for the levels below.
"""

import logging
import os

import coloredlogs

LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Between DEBUG (10) and WARNING (30)
CUSTOM_LEVELS = {
    'TX': 15,
    'DEPLOY': 21,
    'REVERT': 22,
}

FORMAT = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('FUNDME_NETWORK', 'hardhat')
)

LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'revert': {'color': 'magenta'},
    'deploy': {'color': 'cyan', 'bold': True},
    'info': {'color': 'white'},
    'tx': {'color': 'blue'},
    'debug': {'color': 'green'},
}

FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
}


def _level_from_env():
    name = os.getenv('LOG_LEVEL')
    if name is None:
        return logging.WARNING

    assert name in LEVEL_NAMES, 'LOG_LEVEL must be one of {}, got {}'.format(LEVEL_NAMES, name)
    return getattr(logging, name)


_LOG_LVL = _level_from_env()

for _name, _level in CUSTOM_LEVELS.items():
    logging.addLevelName(_level, _name)


def _colored(handler):
    handler.setFormatter(coloredlogs.ColoredFormatter(FORMAT, level_styles=LEVEL_STYLES, field_styles=FIELD_STYLES))
    return handler


def _handlers(name):
    handlers = [_colored(logging.StreamHandler())]

    log_dir = os.getenv('LOG_DIR')
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        plain = logging.FileHandler(os.path.join(log_dir, 'fundme.log'), delay=True)
        plain.setFormatter(logging.Formatter(FORMAT))
        handlers.append(plain)

        colored = logging.FileHandler(os.path.join(log_dir, '{}.log_color'.format(name or 'root')), delay=True)
        handlers.append(_colored(colored))

    return handlers


def _add_level_method(log, name, level):
    def emit(message, *args, **kwargs):
        if log.isEnabledFor(level):
            log._log(level, message, args, **kwargs)

    setattr(log, name.lower(), emit)


def get_logger(name=''):
    log = logging.getLogger(name)

    if not log.handlers:
        for handler in _handlers(name):
            log.addHandler(handler)
        log.propagate = False

    log.setLevel(_LOG_LVL)

    for level_name, level in CUSTOM_LEVELS.items():
        _add_level_method(log, level_name, level)

    return log


def overwrite_logger_level(level):
    """Sets ``level`` on every logger created so far and on those created later."""
    global _LOG_LVL
    _LOG_LVL = level

    for name in list(logging.Logger.manager.loggerDict):
        logging.getLogger(name).setLevel(level)
