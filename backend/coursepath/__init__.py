"""
Merton 课程路径提取器
"""

__version__ = "1.0.0"
