import os
from typing import Dict, Optional

import yaml

from binoxxo.core.models import DifficultyConfig
from binoxxo.generator.difficulty import DEFAULT_DIFFICULTY_CONFIG, Difficulty

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "configs", "difficulty.yaml")


def load_difficulty_config(yaml_path: Optional[str] = None) -> Dict[Difficulty, DifficultyConfig]:
    """
    从YAML文件加载难度配置

    The file holds a ``difficulties`` mapping from difficulty name to the
    fields of ``DifficultyConfig``; fields and difficulties that are left out
    keep their defaults.

    Args:
        yaml_path: 配置文件路径，默认使用包内的 configs/difficulty.yaml

    Returns:
        Dict[Difficulty, DifficultyConfig]: 完整的难度配置表
    """
    path = yaml_path or DEFAULT_CONFIG_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

        if 'difficulties' not in config:
            raise ValueError("配置文件中没有找到'difficulties'字段")

        table = dict(DEFAULT_DIFFICULTY_CONFIG)
        for name, fields in (config['difficulties'] or {}).items():
            difficulty = Difficulty.parse(str(name))
            merged = table[difficulty].model_dump()
            merged.update(fields or {})
            table[difficulty] = DifficultyConfig(**merged)
        return table
    except Exception as e:
        raise RuntimeError(f"加载难度配置失败 {path}: {e}")
