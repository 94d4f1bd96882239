#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
import logging

import colorlog
from wrapt import synchronized


class Log(object):
    """
    Logging module

    Call get() to get a cached instance of a specific logger.
    Colored output can optionally be enabled.
    """


    _LOGGERS = {}
    _use_color = False
    _level = logging.WARNING

    @synchronized
    @classmethod
    def get(cls, tag):
        """
        Get the global logger instance for the given tag

        :param tag: the log tag
        :return: the logger instance
        """
        if tag not in cls._LOGGERS:
            if cls._use_color:
                handler = colorlog.StreamHandler()
                handler.setFormatter(colorlog.ColoredFormatter( \
                    ' %(log_color)s%(name)s/%(levelname)-8s%(reset)s |'
                    ' %(log_color)s%(message)s%(reset)s'))
            else:
                handler = logging.StreamHandler()
                handler.setFormatter(logging.Formatter( \
                    ' %(name)s/%(levelname)-8s | %(message)s'))

            logger = logging.getLogger(tag)
            logger.addHandler(handler)
            logger.setLevel(cls._level)
            logger.propagate = False

            cls._LOGGERS[tag] = logger

        return cls._LOGGERS[tag]


    @classmethod
    def enable_color(cls, enable):
        """
        Enable colored output for loggers. Must be called before
        any loggers are initialized with get()
        """
        cls._use_color = enable


    @synchronized
    @classmethod
    def set_level(cls, level):
        """
        Set the level of every logger, including ones created later

        :param level: a level name or number from the logging module
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        cls._level = level
        for logger in cls._LOGGERS.values():
            logger.setLevel(level)
