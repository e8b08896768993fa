import json

from exam_tree.models import ExamReport
from exam_tree.services.status_service import (
    aggregate_section_status,
    reports_for_section,
    resolve_report_section_key,
    tag_reports,
)
from exam_tree.services.tree_service import build_knowledge_tree

from tests.conftest import ENGLISH_STEPS, MATH_STEPS

SEQUENCE_KEY = "章:极限|节:数列极限"
FUNCTION_KEY = "章:极限|节:函数极限"


def make_report(report_id, score, selected_path, created_at="2024-05-01T10:00:00"):
    return ExamReport(
        id=report_id,
        student_id="student-1",
        subject="高等数学",
        score=score,
        created_at=created_at,
        selected_path=selected_path,
    )


def dump(status_map):
    return {key: status.model_dump(by_alias=True) for key, status in status_map.items()}


def test_math_scenario():
    reports = [make_report("r1", 85, {"章": "极限", "节": "数列极限"})]

    status = aggregate_section_status(reports, MATH_STEPS)

    assert dump(status) == {SEQUENCE_KEY: {"reportCount": 1, "passed": True}}
    assert FUNCTION_KEY not in status


def test_counts_every_report_and_passes_on_any_high_score():
    path = {"章": "极限", "节": "数列极限"}
    reports = [
        make_report("r1", 60, path),
        make_report("r2", 79, path),
        make_report("r3", 80, path),
    ]

    status = aggregate_section_status(reports, MATH_STEPS)[SEQUENCE_KEY]

    assert status.report_count == 3
    assert status.passed is True


def test_scores_below_threshold_do_not_pass():
    reports = [make_report("r1", 79, {"章": "极限", "节": "函数极限"})]
    status = aggregate_section_status(reports, MATH_STEPS)[FUNCTION_KEY]
    assert status.report_count == 1
    assert status.passed is False


def test_aggregation_is_order_independent():
    reports = [
        make_report("r1", 90, {"章": "极限", "节": "数列极限"}),
        make_report("r2", 40, {"节": "数列极限", "章": "极限"}),
        make_report("r3", 70, {"章": "极限", "节": "函数极限"}),
        make_report("r4", 10, None),
    ]
    forward = aggregate_section_status(reports, MATH_STEPS)
    backward = aggregate_section_status(list(reversed(reports)), MATH_STEPS)
    assert dump(forward) == dump(backward)


def test_adding_reports_is_monotonic():
    path = {"章": "极限", "节": "数列极限"}
    reports = [make_report("r1", 95, path)]
    before = aggregate_section_status(reports, MATH_STEPS)[SEQUENCE_KEY]

    reports.append(make_report("r2", 20, path))
    after = aggregate_section_status(reports, MATH_STEPS)[SEQUENCE_KEY]

    assert after.passed is True
    assert after.report_count == before.report_count + 1


def test_malformed_selected_paths_are_skipped():
    reports = [
        make_report("none", 90, None),
        make_report("list", 90, ["章", "节"]),
        make_report("number", 90, 42),
        make_report("bad-json", 90, "{not json"),
        make_report("partial", 90, {"章": "极限"}),
        make_report("empty-level", 90, {"章": "极限", "节": ""}),
    ]

    assert aggregate_section_status(reports, MATH_STEPS) == {}
    assert [report.section_key for report in tag_reports(reports, MATH_STEPS)] == [None] * len(reports)


def test_json_encoded_selected_path_is_decoded():
    raw = json.dumps({"章": "极限", "节": "数列极限", "知识点": "定义"}, ensure_ascii=False)
    assert resolve_report_section_key(raw, MATH_STEPS) == SEQUENCE_KEY


def test_tag_reports_keeps_order_and_original_path():
    path = {"章": "极限", "节": "函数极限"}
    reports = [make_report("r1", 88, path), make_report("r2", 50, None)]

    tagged = tag_reports(reports, MATH_STEPS)

    assert [report.id for report in tagged] == ["r1", "r2"]
    assert tagged[0].section_key == FUNCTION_KEY
    assert tagged[0].selected_path == path
    assert tagged[1].model_dump(mode="json", by_alias=True) == {
        "id": "r2",
        "score": 50,
        "createdAt": "2024-05-01T10:00:00",
        "selectedPath": None,
        "sectionKey": None,
    }


def test_reports_for_section_newest_first():
    path = {"章": "极限", "节": "数列极限"}
    reports = [
        make_report("old", 60, path, created_at="2024-01-01T08:00:00"),
        make_report("other", 60, {"章": "极限", "节": "函数极限"}, created_at="2024-06-01T08:00:00"),
        make_report("new", 90, path, created_at="2024-03-01T08:00:00"),
    ]

    matched = reports_for_section(reports, MATH_STEPS, SEQUENCE_KEY)

    assert [report.id for report in matched] == ["new", "old"]


def test_every_leaf_joins_reports_with_its_full_path(english_catalog):
    tree = build_knowledge_tree(english_catalog, ENGLISH_STEPS, "大学英语")
    reports = [
        make_report(f"r{index}", 85, {step: row[step] for step in ENGLISH_STEPS})
        for index, row in enumerate(english_catalog)
    ]

    status = aggregate_section_status(reports, ENGLISH_STEPS)

    for leaf in tree.iter_leaves():
        assert status[leaf.section_key].report_count == 1
        assert status[leaf.section_key].passed is True


def test_unknown_subject_uses_raw_path_keys():
    path = {"章": "极限"}
    reports = [make_report("r1", 90, path)]
    status = aggregate_section_status(reports, None)
    assert list(status) == [json.dumps(path, ensure_ascii=False)]
