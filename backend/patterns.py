# backend/patterns.py

"""
Pre-compiled regex patterns.
Compiled once at module load time and reused throughout the application.
"""

import re

# Greedy match from the first "{" to the last "}" (model output may wrap JSON in prose or fences)
JSON_OBJECT_PATTERN = re.compile(r'\{.*\}', re.DOTALL)

# Characters that cannot appear in a download file name
UNSAFE_FILENAME_PATTERN = re.compile(r'[\\/:*?"<>|\r\n]+')
