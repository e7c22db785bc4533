from binoxxo.cli import main
from tests.conftest import DUPLICATE_ROWS_4, VALID_6


class TestGenerateMode:
    def test_prints_puzzle(self, capsys):
        assert main(["--mode", "generate", "--difficulty", "easy", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "# Puzzle 1: Easy, 6×6, 22 givens" in out
        assert "## Solution" not in out

    def test_show_solution(self, capsys):
        assert main(["--difficulty", "medium", "--seed", "3", "--show_solution"]) == 0
        out = capsys.readouterr().out
        assert "## Solution" in out
        solution = out.split("## Solution")[1].strip().splitlines()
        assert len(solution) == 8
        assert "_" not in "".join(solution)

    def test_batch_with_image(self, tmp_path, capsys):
        image = tmp_path / "puzzle.png"
        assert main(["--num_cases", "2", "--seed", "1", "--image", str(image)]) == 0
        out = capsys.readouterr().out
        assert "# Puzzle 2" in out
        assert image.exists()

    def test_custom_config(self, tmp_path, capsys):
        config = tmp_path / "difficulty.yaml"
        config.write_text("difficulties:\n  easy:\n    size: 4\n    given_ratio: 0.5\n", encoding="utf-8")
        assert main(["--difficulty_config", str(config), "--seed", "2"]) == 0
        assert "4×4, 8 givens" in capsys.readouterr().out

    def test_missing_config(self, tmp_path):
        assert main(["--difficulty_config", str(tmp_path / "missing.yaml")]) == 1

    def test_invalid_num_cases(self):
        assert main(["--num_cases", "0"]) == 2


class TestCheckMode:
    def test_valid_board(self, tmp_path, capsys):
        path = tmp_path / "board.txt"
        path.write_text(VALID_6, encoding="utf-8")
        assert main(["--mode", "check", "--board_file", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Full:  True" in out
        assert "Success!" in out

    def test_invalid_board(self, tmp_path, capsys):
        path = tmp_path / "board.txt"
        path.write_text(DUPLICATE_ROWS_4, encoding="utf-8")
        assert main(["--mode", "check", "--board_file", str(path)]) == 1
        out = capsys.readouterr().out
        assert "Row 3 is identical to row 1" in out
        assert "Sorry. Try again." in out

    def test_unparsable_board(self, tmp_path):
        path = tmp_path / "board.txt"
        path.write_text("X O\nO Z\n", encoding="utf-8")
        assert main(["--mode", "check", "--board_file", str(path)]) == 2

    def test_missing_board_file(self, tmp_path):
        assert main(["--mode", "check"]) == 2
        assert main(["--mode", "check", "--board_file", str(tmp_path / "none.txt")]) == 2
