#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
子域名扫描工具 - 入口脚本

此脚本提供了一个简单的方式来直接运行subkrek包中的扫描功能（无需安装）。
"""

import sys
import os

# 添加当前目录到Python路径，确保可以导入subkrek包
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == '__main__':
    try:
        from subkrek.main import run
    except ImportError as e:
        print(f"错误: 无法导入subkrek包 - {str(e)}")
        print("请确保依赖已安装: pip install -e .")
        sys.exit(1)
    sys.exit(run())
