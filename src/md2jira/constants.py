#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2jira.

This module centralizes the hardcoded values used across the package:

1. Jira Markup - Fixed syntax fragments and policy values
2. Parser Defaults - Markdown extension toggles
3. Dependencies - Packages required by the parser
4. Configuration - Config file names and environment variable prefix
"""

from __future__ import annotations

# =============================================================================
# Jira Markup
# =============================================================================

# Code languages understood by Jira's {code} macro. Matching is exact and
# case-sensitive; aliases such as "js"/"javascript" are listed separately.
JIRA_CODE_LANGUAGES: frozenset[str] = frozenset(
    {
        "actionscript",
        "ada",
        "applescript",
        "bash",
        "c",
        "c#",
        "c++",
        "cpp",
        "css",
        "erlang",
        "go",
        "groovy",
        "haskell",
        "html",
        "java",
        "javascript",
        "js",
        "json",
        "lua",
        "none",
        "nyan",
        "objc",
        "perl",
        "php",
        "python",
        "r",
        "rainbow",
        "ruby",
        "scala",
        "sh",
        "sql",
        "swift",
        "visualbasic",
        "xml",
        "yaml",
    }
)
DEFAULT_CODE_LANGUAGE = "none"

RAW_HTML_PLACEHOLDER = "<!-- raw HTML omitted -->"

JIRA_QUOTE_OPEN = "{quote}\n"
JIRA_QUOTE_CLOSE = "{quote}"
JIRA_CODE_CLOSE = "{code}"
JIRA_HORIZONTAL_RULE = "----"
JIRA_HARD_BREAK = "\\\n"
JIRA_SOFT_BREAK = "\n"
JIRA_UNORDERED_MARKER = "*"
JIRA_ORDERED_MARKER = "#"
JIRA_HEADER_CELL_DELIMITER = "||"
JIRA_CELL_DELIMITER = "|"

# Jira renders nested ordered lists inconsistently, so ordered lists are
# emitted with bullet markers.
FORCE_UNORDERED_LISTS = True

DEFAULT_SAFE_MODE = False

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_FOOTNOTES = False

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX = "MD2JIRA_"
CONFIG_ENV_VAR = "MD2JIRA_CONFIG"
CONFIG_FILENAMES = [".md2jira.toml", ".md2jira.yaml", ".md2jira.yml", ".md2jira.json"]
PYPROJECT_TOOL_SECTION = "md2jira"
DEFAULT_LOG_LEVEL = "WARNING"
