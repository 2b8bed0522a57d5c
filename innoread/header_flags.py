"""Flags stored in the setup header."""

from __future__ import annotations

import enum


class HeaderFlags(enum.IntFlag):
    """Boolean settings of the [Setup] section; the high bits hold obsolete flags."""

    DISABLE_STARTUP_PROMPT = 1
    CREATE_APP_DIR = 1 << 1
    ALLOW_NO_ICONS = 1 << 2
    ALWAYS_RESTART = 1 << 3
    ALWAYS_USE_PERSONAL_GROUP = 1 << 4
    WINDOW_VISIBLE = 1 << 5
    WINDOW_SHOW_CAPTION = 1 << 6
    WINDOW_RESIZABLE = 1 << 7
    WINDOW_START_MAXIMISED = 1 << 8
    ENABLED_DIR_DOESNT_EXIST_WARNING = 1 << 9
    PASSWORD = 1 << 10
    ALLOW_ROOT_DIRECTORY = 1 << 11
    DISABLE_FINISHED_PAGE = 1 << 12
    CHANGES_ASSOCIATIONS = 1 << 13
    USE_PREVIOUS_APP_DIR = 1 << 14
    BACK_COLOR_HORIZONTAL = 1 << 15
    USE_PREVIOUS_GROUP = 1 << 16
    UPDATE_UNINSTALL_LOG_APP_NAME = 1 << 17
    USE_PREVIOUS_SETUP_TYPE = 1 << 18
    DISABLE_READY_MEMO = 1 << 19
    ALWAYS_SHOW_COMPONENTS_LIST = 1 << 20
    FLAT_COMPONENTS_LIST = 1 << 21
    SHOW_COMPONENT_SIZES = 1 << 22
    USE_PREVIOUS_TASKS = 1 << 23
    DISABLE_READY_PAGE = 1 << 24
    ALWAYS_SHOW_DIR_ON_READY_PAGE = 1 << 25
    ALWAYS_SHOW_GROUP_ON_READY_PAGE = 1 << 26
    ALLOW_UNC_PATH = 1 << 27
    USER_INFO_PAGE = 1 << 28
    USE_PREVIOUS_USER_INFO = 1 << 29
    UNINSTALL_RESTART_COMPUTER = 1 << 30
    RESTART_IF_NEEDED_BY_RUN = 1 << 31
    SHOW_TASKS_TREE_LINES = 1 << 32
    ALLOW_CANCEL_DURING_INSTALL = 1 << 33
    WIZARD_IMAGE_STRETCH = 1 << 34
    APPEND_DEFAULT_DIR_NAME = 1 << 35
    APPEND_DEFAULT_GROUP_NAME = 1 << 36
    ENCRYPTION_USED = 1 << 37
    CHANGES_ENVIRONMENT = 1 << 38
    SETUP_LOGGING = 1 << 39
    SIGNED_UNINSTALLER = 1 << 40
    USE_PREVIOUS_LANGUAGE = 1 << 41
    DISABLE_WELCOME_PAGE = 1 << 42
    CLOSE_APPLICATIONS = 1 << 43
    RESTART_APPLICATIONS = 1 << 44
    ALLOW_NETWORK_DRIVE = 1 << 45
    FORCE_CLOSE_APPLICATIONS = 1 << 46
    APP_NAME_HAS_CONSTS = 1 << 47
    USE_PREVIOUS_PRIVILEGES = 1 << 48
    WIZARD_RESIZABLE = 1 << 49
    UNINSTALL_LOGGING = 1 << 50

    # Obsolete flags
    UNINSTALLABLE = 1 << 114
    DISABLE_DIR_PAGE = 1 << 115
    DISABLE_PROGRAM_GROUP_PAGE = 1 << 116
    DISABLE_APPEND_DIR = 1 << 117
    ADMIN_PRIVILEGES_REQUIRED = 1 << 118
    ALWAYS_CREATE_UNINSTALL_ICON = 1 << 119
    CREATE_UNINSTALL_REG_KEY = 1 << 120
    BZIP_USED = 1 << 121
    SHOW_LANGUAGE_DIALOG = 1 << 122
    DETECT_LANGUAGE_USING_LOCALE = 1 << 123
    DISABLE_DIR_EXISTS_WARNING = 1 << 124
    BACK_SOLID = 1 << 125
    OVERWRITE_UNINSTALL_REG_ENTRIES = 1 << 126
    SHOW_UNDISPLAYABLE_LANGUAGES = 1 << 127


class PrivilegesRequiredOverrides(enum.IntFlag):
    """Ways in which the required privilege level may be overridden."""

    COMMAND_LINE = 1
    DIALOG = 1 << 1