from exam_tree.api.deps import get_catalogs
from exam_tree.core.catalog import CatalogStore
from exam_tree.main import app


def save(client, headers, subject, score, selected_path):
    response = client.post(
        "/student/save-report",
        json={"subject": subject, "selectedPath": selected_path, "questions": [], "answers": {}, "score": score},
        headers=headers,
    )
    assert response.status_code == 200
    return response.json()["reportId"]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_knowledge_tree_requires_student(client):
    assert client.get("/student/knowledge-tree/math").status_code == 401


def test_knowledge_tree_rejects_unknown_subject(client, student_headers):
    response = client.get("/student/knowledge-tree/physics", headers=student_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "无效科目"


def test_knowledge_tree_payload(client, student_headers):
    passed_id = save(client, student_headers, "高等数学", 85, {"章": "极限", "节": "数列极限"})
    orphan_id = save(client, student_headers, "高等数学", 95, None)
    save(client, {"X-Student-Id": "someone-else"}, "高等数学", 10, {"章": "极限", "节": "函数极限"})

    response = client.get("/student/knowledge-tree/math", headers=student_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["tree"]["rootLabel"] == "高等数学"
    assert data["tree"]["steps"] == ["章", "节"]
    assert data["tree"]["nodes"] == [
        {
            "label": "极限",
            "children": [
                {"label": "函数极限", "sectionKey": "章:极限|节:函数极限"},
                {"label": "数列极限", "sectionKey": "章:极限|节:数列极限"},
            ],
        }
    ]
    assert data["sectionStatus"] == {"章:极限|节:数列极限": {"reportCount": 1, "passed": True}}

    by_id = {report["id"]: report for report in data["reports"]}
    assert set(by_id) == {passed_id, orphan_id}
    assert by_id[passed_id]["sectionKey"] == "章:极限|节:数列极限"
    assert by_id[passed_id]["score"] == 85
    assert by_id[orphan_id]["sectionKey"] is None
    assert by_id[orphan_id]["selectedPath"] is None


def test_section_reports(client, student_headers):
    save(client, student_headers, "math", 60, {"章": "极限", "节": "数列极限"})
    save(client, student_headers, "math", 90, {"章": "极限", "节": "数列极限"})
    save(client, student_headers, "math", 90, {"章": "极限", "节": "函数极限"})

    response = client.get(
        "/student/knowledge-tree/math/section-reports",
        params={"sectionKey": "章:极限|节:数列极限"},
        headers=student_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["path"] == {"章": "极限", "节": "数列极限"}
    assert data["knowledgePoints"] == ["定义", "性质"]
    assert data["status"] == {"reportCount": 2, "passed": True}
    assert len(data["reports"]) == 2
    assert all(report["sectionKey"] == "章:极限|节:数列极限" for report in data["reports"])


def test_save_report_validates_subject_and_score(client, student_headers):
    bad_subject = client.post(
        "/student/save-report",
        json={"subject": "大学物理", "score": 90},
        headers=student_headers,
    )
    assert bad_subject.status_code == 400

    bad_score = client.post(
        "/student/save-report",
        json={"subject": "高等数学", "score": 120},
        headers=student_headers,
    )
    assert bad_score.status_code == 422


def test_report_detail_includes_knowledge_points(client, student_headers):
    report_id = save(client, student_headers, "高等数学", 72, {"章": "极限", "节": "数列极限"})

    response = client.get(f"/student/report/{report_id}", headers=student_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["subject"] == "高等数学"
    assert data["sectionKey"] == "章:极限|节:数列极限"
    assert data["knowledgePointCount"] == 2
    assert data["knowledgePoints"] == ["定义", "性质"]


def test_report_detail_hidden_from_other_students(client, student_headers):
    report_id = save(client, student_headers, "高等数学", 72, {"章": "极限", "节": "数列极限"})

    response = client.get(f"/student/report/{report_id}", headers={"X-Student-Id": "intruder"})

    assert response.status_code == 404


def test_list_subjects(client):
    subjects = client.get("/catalog/subjects").json()
    assert [subject["id"] for subject in subjects] == ["chinese", "english", "math", "computer"]
    assert subjects[1] == {"id": "english", "name": "大学英语", "steps": ["板块", "部分", "章", "节"]}


def test_level_options(client):
    first = client.get("/catalog/math/options", params={"step": 0}).json()
    assert first == {"step": 0, "stepName": "章", "options": ["极限"]}

    points = client.get("/catalog/math/options", params={"step": 2, "章": "极限", "节": "函数极限"}).json()
    assert points == {"step": 2, "stepName": "知识点", "options": ["左右极限"]}

    assert client.get("/catalog/math/options", params={"step": 3}).status_code == 400


def test_knowledge_points_endpoint(client):
    data = client.get("/catalog/math/knowledge-points", params={"章": "极限", "节": "数列极限"}).json()
    assert data == {"count": 2, "knowledgePoints": ["定义", "性质"]}

    missing = client.get("/catalog/math/knowledge-points", params={"章": "导数"}).json()
    assert missing == {"count": 0, "knowledgePoints": []}


def test_section_reports_with_separator_in_level_value(client, student_headers):
    app.dependency_overrides[get_catalogs] = lambda: CatalogStore.from_rows({
        "computer": [{"章": "输入|输出", "节": "外部设备", "知识点": ["键盘", "显示器"]}],
    })
    save(client, student_headers, "计算机基础", 88, {"章": "输入|输出", "节": "外部设备"})

    response = client.get(
        "/student/knowledge-tree/computer/section-reports",
        params={"sectionKey": "章:输入|输出|节:外部设备"},
        headers=student_headers,
    )

    data = response.json()
    assert data["path"] == {"章": "输入|输出", "节": "外部设备"}
    assert data["knowledgePoints"] == ["键盘", "显示器"]
    assert data["status"] == {"reportCount": 1, "passed": True}
