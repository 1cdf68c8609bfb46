"""
microCMS API clients.

This subpackage provides functions that read blog posts, categories and
tags from the microCMS REST API.  It handles endpoint URLs, API key
header injection and validation of the JSON payloads into models.
"""
