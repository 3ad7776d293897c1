"""Tests for the demo driver."""

from primefield.demo import run_demo


EXPECTED = """\
FieldElement_19(9)
FieldElement_19(14)
FieldElement_19(14)
FieldElement_19(3)
FieldElement_19(8)
"""


def test_main_prints_reference_lines(capsys):
    run_demo.main()
    assert capsys.readouterr().out == EXPECTED


def test_sample_results_other_prime():
    results = run_demo.sample_results(prime=31)
    assert [r.prime for r in results] == [31] * 5
    assert results[0].num == 9
    assert results[4].num == 8
