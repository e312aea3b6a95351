# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/21 22:14:05
# @Author : Kariko Lin

from re import compile as regex

COMMENT_MARKERS = (';', '#')
PAIRING = '='
VALUE_SEPARATOR = ','
NEWLINE = '\n'

# leading blanks before `[` are tolerated, `;[]` is a comment.
SECTION_HEADER = regex(r'^\s*\[.*\]')
# a deletion set, not a trim: " [ti tle] " -> "title"
SECTION_NAME_TRIM = regex(r'\[|\]| ')

# chardet guesses below this are not trusted.
CODEC_CONFIDENCE = 0.8
FALLBACK_CODECS = ('utf-8', 'gbk')
