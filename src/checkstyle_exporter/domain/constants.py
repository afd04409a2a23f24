"""
Checkstyle configuration constants.
"""

REPOSITORY_KEY: str = "checkstyle"
PLUGIN_NAME: str = "Checkstyle"
JAVA_KEY: str = "java"
MIME_TYPE: str = "application/xml"

# Settings key holding the raw XML fragment of custom filter modules
FILTERS_KEY: str = "sonar.checkstyle.filters"

XML_DECLARATION: str = '<?xml version="1.0" encoding="UTF-8"?>'
DOCTYPE_DECLARATION: str = (
    '<!DOCTYPE module PUBLIC "-//Puppy Crawl//DTD Check Configuration 1.2//EN" '
    '"http://www.puppycrawl.com/dtds/configuration_1_2.dtd">'
)
GENERATED_COMMENT: str = "<!-- Generated by Sonar -->"

CHECKER_MODULE: str = "Checker"
TREE_WALKER_MODULE: str = "TreeWalker"
TREE_WALKER_PREFIX: str = "checker/treewalker/"
FILE_CONTENTS_HOLDER: str = '<module name="FileContentsHolder"/> '
SUPPRESS_WARNINGS_HOLDER: str = '<module name="SuppressWarningsHolder"/> '

# Matched literally. Whitespace variants of this element do not count.
SUPPRESS_WARNINGS_FILTER_MARKER: str = '<module name="SuppressWarningsFilter" />'
