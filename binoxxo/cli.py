#!/usr/bin/env python3
"""
Binoxxo 命令行界面

使用方法:
1. 生成谜题：
   python -m binoxxo --mode generate --difficulty medium --seed 42 --show_solution

2. 批量生成并导出最后一题的图片：
   python -m binoxxo --mode generate --difficulty hard --num_cases 5 --image hard.png

3. 检查棋盘文件：
   python -m binoxxo --mode check --board_file board.txt
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from tqdm import tqdm

from binoxxo.core.rules import check_board, find_violations
from binoxxo.generator.binoxxo_generator import BinoxxoGenerator, GenerationError
from binoxxo.generator.difficulty import Difficulty
from binoxxo.utils.board_format import format_board, format_puzzle, parse_board
from binoxxo.utils.load_difficulty_config import load_difficulty_config
from binoxxo.utils.render import save_board_image


def configure_logging(level_name: str):
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # module loggers carry their own level from BINOXXO_LOGGING_LEVEL
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("binoxxo"):
            logging.getLogger(name).setLevel(level)


def run_generate(args) -> int:
    difficulty_config = None
    if args.difficulty_config:
        if not os.path.exists(args.difficulty_config):
            print(f"❌ 错误: 难度配置文件不存在: {args.difficulty_config}")
            return 1
        try:
            difficulty_config = load_difficulty_config(args.difficulty_config)
        except RuntimeError as e:
            print(f"❌ 错误: {e}")
            return 1

    difficulty = Difficulty.parse(args.difficulty)
    generator = BinoxxoGenerator(seed=args.seed, difficulty_config=difficulty_config)

    cases = range(args.num_cases)
    if args.num_cases > 1:
        cases = tqdm(cases, desc=f"Generating {difficulty} puzzles")

    puzzles = []
    for _ in cases:
        try:
            puzzles.append(generator.generate_puzzle(difficulty))
        except GenerationError as e:
            print(f"❌ 错误: {e}")
            return 1

    for index, puzzle in enumerate(puzzles, 1):
        size = puzzle.board.size()
        print(f"\n# Puzzle {index}: {difficulty}, {size}×{size}, {puzzle.given_count} givens")
        print(format_puzzle(puzzle.board, puzzle.editable))
        if args.show_solution:
            print("\n## Solution")
            print(format_board(puzzle.solution))

    if args.image and puzzles:
        last = puzzles[-1]
        save_board_image(last.board, args.image, editable=last.editable)
        print(f"\nSaved image: {args.image}")
    return 0


def run_check(args) -> int:
    if not args.board_file:
        print("❌ 错误: check 模式必须指定 --board_file")
        return 2
    if not os.path.exists(args.board_file):
        print(f"❌ 错误: 棋盘文件不存在: {args.board_file}")
        return 2

    with open(args.board_file, 'r', encoding='utf-8') as f:
        text = f.read()
    try:
        board = parse_board(text)
    except ValueError as e:
        print(f"❌ 错误: 无法解析棋盘: {e}")
        return 2

    result = check_board(board)
    print(f"Full:  {result.is_full}")
    print(f"Valid: {result.is_valid}")
    for violation in find_violations(board):
        print(f"- {violation.describe()}")
    if result.is_won:
        print("Success!")
    elif result.is_failed:
        print("Sorry. Try again.")
    return 0 if result.is_valid else 1


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = argparse.ArgumentParser(
        description="Generate and check Binoxxo puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--mode",
        choices=["generate", "check"],
        default="generate",
        help="运行模式: generate(生成谜题), check(检查棋盘文件)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.EASY.value,
        help="难度 (默认: easy)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="随机种子，用于复现谜题"
    )
    parser.add_argument(
        "--num_cases",
        type=int,
        default=1,
        help="生成数量 (默认: 1)"
    )
    parser.add_argument(
        "--show_solution",
        action="store_true",
        help="同时打印答案"
    )
    parser.add_argument(
        "--image",
        default=None,
        help="将最后一个谜题保存为PNG图片的路径"
    )
    parser.add_argument(
        "--difficulty_config",
        default=None,
        help="难度配置YAML文件路径"
    )
    parser.add_argument(
        "--board_file",
        default=None,
        help="待检查的棋盘文本文件 (check 模式使用)"
    )
    parser.add_argument(
        "--log_level",
        default=os.getenv("BINOXXO_LOGGING_LEVEL", "WARNING"),
        help="日志级别 (默认: WARNING)"
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.num_cases < 1:
        print("❌ 错误: --num_cases 必须大于 0")
        return 2

    if args.mode == "check":
        return run_check(args)
    return run_generate(args)


if __name__ == "__main__":
    sys.exit(main())
