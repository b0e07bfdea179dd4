# -*- coding: utf-8 -*-
"""
主入口模块

示例：
  subkrek -d example.com
  subkrek -d example.com -b -c 100 -o results.txt
  subkrek -d example.com -w lists/ -w extra.txt -o results.json
"""

import argparse
import asyncio
import os
import sys

from .core.config import Config
from .core.scanner import ScanCoordinator
from .engines.probe_engine import ProbeEngine, ProbeObserver
from .errors import InputError, SourceError
from .models import ProbeOutcome
from .output import exporter_for
from .utils.logger import set_level

BANNER = r"""
   _____       __    __ __          __
  / ___/__  __/ /_  / //_/_________/ /__
  \__ \/ / / / __ \/ ,<  / ___/ _ \/ //_/
 ___/ / /_/ / /_/ / /| |/ /  /  __/ ,<
/____/\__,_/_.___/_/ |_/_/   \___/_/|_|

        (⌐■_■) Subdomain Scanner
"""


class ConsoleObserver(ProbeObserver):
    """在控制台逐条打印探测结果"""

    def __init__(self, show_dead: bool = False, stream=None):
        self.show_dead = show_dead
        self.stream = stream or sys.stdout

    def on_start(self, total):
        print(f"[*] 共 {total} 个候选待扫描", file=self.stream)

    def on_result(self, result, completed, total):
        if result.outcome is ProbeOutcome.LIVE:
            print(f"[{completed}/{total}] ✓ {result.candidate}", file=self.stream)
        elif self.show_dead:
            mark = '✗' if result.outcome is ProbeOutcome.DEAD else '!'
            print(f"[{completed}/{total}] {mark} {result.candidate} ({result.detail})",
                  file=self.stream)

    def on_finish(self, completed):
        print(f"[*] 探测完成，共 {completed} 个", file=self.stream)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='subkrek',
        description='子域名扫描工具：字典爆破 + Wayback Machine 历史子域名'
    )
    parser.add_argument('-d', '--domain', required=True, help='目标域名 (例如 example.com)')
    parser.add_argument('-c', '--concurrency', type=int, help='并发连接数 (默认: 50)')
    parser.add_argument('-b', '--wayback', action='store_true', help='使用 Wayback Machine 收集历史子域名')
    parser.add_argument('-w', '--wordlist', action='append', help='字典文件或目录，可重复指定')
    parser.add_argument('-o', '--output', help='输出文件路径 (.json 为完整汇总，其余为每行一个子域名)')
    parser.add_argument('-t', '--timeout', type=float, help='单个探测的超时时间 (秒，默认: 5)')
    parser.add_argument('-p', '--port', type=int, help='探测端口 (默认: 80)')
    parser.add_argument('--config', help='YAML 配置文件路径')
    parser.add_argument('-v', '--verbose', action='store_true', help='显示所有探测结果和调试日志')
    return parser


async def main(argv=None):
    """主函数，返回进程退出码"""
    args = build_parser().parse_args(argv)

    config = Config(args.config)
    config.update(concurrency=args.concurrency, timeout=args.timeout, port=args.port)
    set_level('DEBUG' if args.verbose else config.get('log_level', 'INFO'))

    wordlists = [os.path.abspath(p) for p in args.wordlist] if args.wordlist else None

    print(BANNER)
    probe_engine = ProbeEngine(
        port=config.get('port'),
        timeout=config.get('timeout'),
        observer=ConsoleObserver(show_dead=args.verbose),
        nameservers=config.get('nameservers'),
    )
    scanner = ScanCoordinator.from_config(
        config, wordlists=wordlists, use_wayback=args.wayback, probe_engine=probe_engine
    )

    try:
        summary = await scanner.run(args.domain)
    except (InputError, SourceError) as e:
        print(f"\n[!] {e}")
        return 1
    finally:
        scanner.close()

    if summary.live:
        print("\n有效子域名:")
        for subdomain in summary.live:
            print(f"✅ {subdomain}")
    else:
        print("\n没有发现有效的子域名。")

    if args.output:
        exporter_for(args.output).export(summary, args.output)
        print(f"\n结果已保存到: {args.output}")

    print("\n扫描摘要:")
    print(f"耗时: {summary.elapsed:.2f}s")
    print(f"存活: {summary.live_count}")
    print(f"无效: {summary.dead_count}")
    print(f"出错: {summary.errored_count}")
    print(f"总计: {summary.total}")
    return 0


def run():
    """运行函数，处理Windows平台的兼容性"""
    # aiodns 在 Windows 上需要 SelectorEventLoop
    if sys.platform == 'win32':
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        return asyncio.run(main())
    except KeyboardInterrupt:
        print("\n扫描被用户中断")
        return 130


if __name__ == '__main__':
    sys.exit(run())
