"""
选择路径级联选项服务
学生生成测评前逐级选择 板块/章/节/知识点，每一步的选项由前面已选的层级过滤得到
"""

from typing import Any, Iterable, List, Mapping, Sequence

from exam_tree.core.subjects import KNOWLEDGE_POINT_FIELD


def _unique(values: Iterable[Any]) -> List[Any]:
    """去重并保持首次出现顺序"""
    seen = set()
    result = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def filter_catalog(catalog: Iterable[Mapping[str, Any]], steps: Sequence[str],
                   selected: Mapping[str, Any], step: int) -> List[Mapping[str, Any]]:
    """按 step 之前已选择的层级过滤目录行，未选择的层级不参与过滤"""
    rows = [row for row in catalog if isinstance(row, Mapping)]
    for step_name in steps[:step]:
        selected_value = selected.get(step_name)
        if selected_value:
            rows = [row for row in rows if row.get(step_name) == selected_value]
    return rows


def level_options(catalog: Iterable[Mapping[str, Any]], steps: Sequence[str],
                  selected: Mapping[str, Any], step: int) -> List[str]:
    """
    获取某一步的可选项

    Args:
        catalog: 目录行列表
        steps: 科目层级列表
        selected: 已选择的层级（层级名称 -> 取值）
        step: 当前步骤序号；等于层级数时为知识点步骤

    Returns:
        去重后的选项列表（保持目录中的出现顺序）；步骤越界返回空列表
    """
    if step < 0 or step > len(steps):
        return []

    rows = filter_catalog(catalog, steps, selected, step)

    if step == len(steps):
        points: List[Any] = []
        for row in rows:
            value = row.get(KNOWLEDGE_POINT_FIELD)
            if isinstance(value, (list, tuple)):
                points.extend(value)
            elif value:
                points.append(value)
        return _unique(point for point in points if isinstance(point, str))

    step_name = steps[step]
    return _unique(
        row[step_name] for row in rows
        if isinstance(row.get(step_name), str) and row[step_name]
    )


def selection_steps(steps: Sequence[str]) -> List[str]:
    """选择流程的全部步骤：科目层级 + 知识点"""
    return list(steps) + [KNOWLEDGE_POINT_FIELD]
