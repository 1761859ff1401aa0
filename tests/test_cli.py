"""Tests for the terminal report."""

from mortgage_calc.cli import main


class TestCli:
    def test_default_report(self, capsys):
        assert main(["--principal", "800,000", "--rate", "6", "--years", "30"]) == 0
        out = capsys.readouterr().out
        assert "Monthly Payment:  $4,796.40" in out
        assert "Loan Amount:      $800,000" in out
        assert "Year 30" in out
        assert "Month 12" not in out

    def test_monthly_rows(self, capsys):
        assert main(["--principal", "12000", "--rate", "6", "--years", "1", "--monthly"]) == 0
        out = capsys.readouterr().out
        assert "Year 1" in out
        assert "Month 12" in out

    def test_summary_only(self, capsys):
        assert main(["--no-schedule"]) == 0
        out = capsys.readouterr().out
        assert "Loan Summary" in out
        assert "Amortization Schedule" not in out

    def test_invalid_input_exits_2(self, capsys):
        assert main(["--rate", "25", "--years", "0"]) == 2
        err = capsys.readouterr().err
        assert "Interest Rate must be no more than 20" in err
        assert "Loan Term must be at least 1" in err

    def test_fractional_term_exits_2(self, capsys):
        assert main(["--principal", "200000", "--rate", "6", "--years", "15.5"]) == 2
        captured = capsys.readouterr()
        assert "Loan Term must be a whole number" in captured.err
        assert "Monthly Payment" not in captured.out
