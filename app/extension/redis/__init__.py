"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : __init__.py
# @Software: PyCharm
"""
