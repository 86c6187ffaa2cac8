# -*- coding: utf-8 -*-
"""
Language Editor Core Package

Operations on phrase stores: text exchange, merging and navigation.
"""
