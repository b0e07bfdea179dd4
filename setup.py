#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
subkrek包的安装脚本
"""

from setuptools import setup, find_packages
import os

# 获取包的版本号
try:
    with open(os.path.join('subkrek', '__init__.py'), 'r', encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                version = line.strip().split('=')[1].strip().strip('"').strip("'")
                break
        else:
            version = '0.1.0'
except OSError:
    version = '0.1.0'

# 读取README文件内容
try:
    with open('README.md', 'r', encoding='utf-8') as f:
        long_description = f.read()
except OSError:
    long_description = "子域名扫描工具"

# 定义依赖项
install_requires = [
    'requests>=2.25.0',
    'PyYAML>=5.4',
    'aiodns>=3.0,<4',
]

# 设置包的配置
setup(
    name='subkrek',
    version=version,
    description='子域名扫描工具：字典爆破 + Wayback Machine 历史子域名 + 有界并发存活探测',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='PyHack-Lab',
    author_email='',
    url='',
    packages=find_packages(include=['subkrek', 'subkrek.*']),
    include_package_data=True,
    package_data={
        'subkrek': ['config/*.yaml', 'wordlists/*.txt'],
    },
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'subkrek=subkrek.main:run',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Security',
        'Topic :: Internet :: Name Service (DNS)',
        'Topic :: Utilities',
    ],
    keywords='subdomain-scanner, wayback-machine, security, reconnaissance',
)
