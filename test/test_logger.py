from gearsetup.gear import Equipment, EquipmentSlot, optimal_gear_setup
from gearsetup.logger import Logger, format_selection, format_set, format_weight
from gearsetup.solvers import mwis


def test_format_helpers():
    assert format_set(set()) == "∅"
    assert format_set({3, 1}) == "{1, 3}"
    assert format_set({EquipmentSlot.HEAD}) == "{HEAD}"
    assert format_weight(2.5) == "2.5"
    assert format_weight(3.0) == "3"
    helm = Equipment.create(1, "helm", ["head"])
    assert format_selection([helm]) == "{helm}"


def test_disabled_logger_records_nothing():
    logger = Logger("GearSetupTestDisabled")
    logger.disabled = True
    logger.section("hidden")
    logger.info("hidden")
    assert "hidden" not in logger.get_html_content()


def test_table_and_adjacency_rendering():
    logger = Logger("GearSetupTestRender")
    logger.table([["a", 1]], headers=["item", "weight"], title="Items")
    logger.adjacency([[False, True], [True, False]], ["a", "b"], title="Conflicts")

    html = logger.get_html_content()
    assert "<h4>Items</h4>" in html
    assert "<td>a</td>" in html
    assert "Conflicts" in html
    assert "a | . 1" in html


def test_solver_trace(traced_logger, tmp_path):
    mwis.find([1, 2, 3], lambda a, b: abs(a - b) == 1, lambda v: 1.0)

    html = traced_logger.get_html_content()
    assert "Maximum weight independent set over 3 vertices" in html
    assert "exhaustive search" in html

    output = traced_logger.write_html(tmp_path / "trace" / "solver.html")
    assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_gear_trace(traced_logger):
    candidates = [
        Equipment.create(1, "godsword", ["weapon", "shield"], {"weight": 10}),
        Equipment.create(2, "scimitar", ["weapon"], {"weight": 7}),
        Equipment.create(3, "defender", ["shield"], {"weight": 6}),
    ]
    optimal_gear_setup.find(candidates, lambda e: e.bonus("weight"))

    html = traced_logger.get_html_content()
    assert "Executing find" in html
    assert "Dominated multi-slot items: 3 -&gt; 2 candidates (1 removed)" in html
    assert "find completed successfully" in html
