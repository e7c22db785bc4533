from abc import ABC, abstractmethod


class BaseGenerator(ABC):
    """
    谜题生成器的基类，定义了生成谜题的通用接口。
    """

    @abstractmethod
    def generate(self, difficulty):
        """
        按难度生成一局新游戏。

        Args:
            difficulty: 难度级别

        Returns:
            (Board, EditableMask): 题面棋盘与可编辑格子
        """
        pass

    @abstractmethod
    def _get_difficulty_params(self, difficulty):
        """
        根据难度级别获取相应的参数配置。

        Args:
            difficulty: 难度级别

        Returns:
            DifficultyConfig: 包含棋盘尺寸与提示格比例的配置
        """
        pass
