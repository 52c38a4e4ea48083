# -*- coding: utf-8 -*-
"""
File loaders for problem instances.
"""
