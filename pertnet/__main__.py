"""PertNet项目的主入口模块。

此模块提供命令行接口，用于：
1. 从CSV文件加载并校验任务
2. 执行PERT/CPM计算
3. 输出项目总工期、关键路径和任务明细
4. 导出CSV报告、甘特图和draw.io图表

Typical usage example:

    python -m pertnet analyze \
        --tasks tasks.csv \
        --output pert.drawio \
        --report report.csv \
        --gantt gantt.png
"""

import argparse
import logging
import sys
from typing import Optional

from pertnet.engine.pert import PertEngine
from pertnet.engine.result import PertResult
from pertnet.errors import PertError, TaskValidationError
from pertnet.interfaces.base_engine import EngineConfig
from pertnet.render.drawio import DiagramLayout, DrawioRenderer
from pertnet.task.task import TaskSet

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def analyze(
    tasks_csv: str,
    output: Optional[str] = None,
    report: Optional[str] = None,
    gantt: Optional[str] = None,
    layout: str = 'grid',
    strict_estimates: bool = True,
    verbose: bool = False
) -> Optional[PertResult]:
    """执行PERT分析

    Args:
        tasks_csv: 任务CSV文件路径
        output: draw.io图表输出路径
        report: CSV报告输出路径
        gantt: 甘特图输出路径
        layout: 图表布局（'grid'或'layered'）
        strict_estimates: 是否拒绝不满足 O <= M <= P 的时间估计
        verbose: 是否输出详细日志

    Returns:
        计算成功返回结果集；否则返回None
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        # 加载任务
        logger.info("加载任务...")
        tasks = TaskSet(strict_estimates=strict_estimates)
        tasks.load_tasks(tasks_csv)
        logger.info(f"任务加载完成：{len(tasks)}个任务")

        # 执行计算
        config = EngineConfig(strict_estimates=strict_estimates, verbose=verbose)
        result = PertEngine(tasks, config).calculate()
    except TaskValidationError as e:
        logger.error("任务文件校验失败：")
        for message in e.errors:
            logger.error(f"  {message}")
        return None
    except (PertError, FileNotFoundError) as e:
        logger.error(f"PERT计算失败：{str(e)}")
        return None

    logger.info(f"项目总工期：{result.project_finish_time:.2f}")
    logger.info(f"关键路径：{' -> '.join(result.critical_path_ids) or '无'}")
    bottlenecks = result.get_bottleneck_ids()
    if bottlenecks:
        logger.info(f"瓶颈任务：{', '.join(bottlenecks)}")
    print(result.to_dataframe().to_string(index=False))

    # 保存结果
    if output:
        DrawioRenderer(DiagramLayout(mode=layout)).save(result, output)
    if report:
        result.save_to_csv(report)
        logger.info(f"CSV报告已保存到{report}")
    if gantt:
        result.visualize(gantt)
        logger.info(f"甘特图已保存到{gantt}")

    return result


def main():
    """命令行入口函数"""
    parser = argparse.ArgumentParser(
        description="PertNet PERT/CPM项目进度分析工具"
    )

    # 添加子命令
    subparsers = parser.add_subparsers(
        dest='command',
        help='可用命令'
    )

    # analyze命令
    analyze_parser = subparsers.add_parser(
        'analyze',
        help='执行PERT分析'
    )
    analyze_parser.add_argument(
        '--tasks',
        required=True,
        help='任务CSV文件路径'
    )
    analyze_parser.add_argument(
        '--output',
        help='draw.io图表输出路径'
    )
    analyze_parser.add_argument(
        '--report',
        help='CSV报告输出路径'
    )
    analyze_parser.add_argument(
        '--gantt',
        help='甘特图输出路径'
    )
    analyze_parser.add_argument(
        '--layout',
        choices=['grid', 'layered'],
        default='grid',
        help='图表布局'
    )
    analyze_parser.add_argument(
        '--lenient',
        action='store_true',
        help='允许不满足 O <= M <= P 的时间估计'
    )
    analyze_parser.add_argument(
        '--verbose',
        action='store_true',
        help='输出详细日志'
    )

    # 解析命令行参数
    args = parser.parse_args()

    if args.command == 'analyze':
        result = analyze(
            tasks_csv=args.tasks,
            output=args.output,
            report=args.report,
            gantt=args.gantt,
            layout=args.layout,
            strict_estimates=not args.lenient,
            verbose=args.verbose
        )
        if result is None:
            sys.exit(1)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
