"""Tests for the style API routes."""

import pytest
from fastapi.testclient import TestClient

from nested_details.api.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


VIEW = {"view_id": "articles", "display_id": "page_1", "display_plugin": "page"}


class TestServiceEndpoints:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["endpoints"] == {"styles": "/v1/styles"}

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["styles_loaded"] >= 1


class TestStyleDefinitions:
    def test_list_styles(self, client):
        response = client.get("/v1/styles")

        assert response.status_code == 200
        ids = [s["plugin_id"] for s in response.json()]
        assert "nested_details" in ids

    def test_get_style(self, client):
        response = client.get("/v1/styles/nested_details")

        assert response.status_code == 200
        assert response.json()["theme"] == "views_view_nested_details"

    def test_unknown_style_is_404(self, client):
        response = client.get("/v1/styles/accordion")

        assert response.status_code == 404
        assert "nested_details" in response.json()["detail"]

    def test_default_options(self, client):
        response = client.get("/v1/styles/nested_details/options")

        assert response.status_code == 200
        body = response.json()
        assert body["collapsed"] is False
        assert body["open_first"] is True

    def test_options_form(self, client):
        response = client.post(
            "/v1/styles/nested_details/options-form",
            json={"options": {"collapsed": True}, "field_labels": {"title": "Title"}},
        )

        assert response.status_code == 200
        form = response.json()
        assert [e["name"] for e in form] == ["collapsed", "open_first", "title", "description"]
        assert form[0]["default_value"] is True
        assert form[2]["options"] == {"": "- None -", "title": "Title"}

    def test_reload(self, client):
        response = client.post("/v1/styles/reload")

        assert response.status_code == 200
        assert response.json()["reloaded"] is True


class TestRender:
    def test_render_grouped_sets(self, client):
        response = client.post(
            "/v1/styles/nested_details/render",
            json={
                "view": VIEW,
                "options": {
                    "row_class": "row",
                    "grouping": [{"field": "type"}, {"field": "status"}],
                },
                "sets": [
                    {
                        "group": "Article",
                        "level": 0,
                        "rows": [{"group": "Draft", "level": 1, "rows": [{"id": 1}]}],
                    },
                    {"group": "Page", "level": 0, "rows": [{"id": 2}, {"id": 3}]},
                ],
            },
        )

        assert response.status_code == 200
        outcome = response.json()
        assert outcome["status"] == "rendered"
        nested, leaf = outcome["nodes"]

        assert nested["title"] == "Article"
        assert nested["body"]["kind"] == "nested"
        assert nested["body"]["grouping"]["field"] == "type"
        assert nested["body"]["rows"][0]["kind"] == "leaf"
        assert nested["body"]["theme"][-1] == "views_view_nested_details_section_grouping"

        assert leaf["title"] == "Page"
        assert leaf["body"]["kind"] == "rows"
        assert [(r["index"], r["content"]["id"], r["css_class"]) for r in leaf["body"]["rows"]] == [
            (0, 2, "row"),
            (1, 3, "row"),
        ]

    def test_render_without_row_plugin_reports_outcome(self, client):
        response = client.post(
            "/v1/styles/nested_details/render",
            json={
                "view": VIEW,
                "sets": [{"group": "", "level": 0, "rows": [{"id": 1}]}],
                "row_plugin": None,
            },
        )

        assert response.status_code == 200
        assert response.json() == {"status": "no_row_renderer", "nodes": []}

    def test_render_unknown_row_plugin_is_400(self, client):
        response = client.post(
            "/v1/styles/nested_details/render",
            json={"view": VIEW, "sets": [], "row_plugin": "teaser"},
        )

        assert response.status_code == 400

    def test_render_requires_view(self, client):
        response = client.post("/v1/styles/nested_details/render", json={"sets": []})

        assert response.status_code == 422

    def test_render_unknown_style_is_404(self, client):
        response = client.post(
            "/v1/styles/accordion/render", json={"view": VIEW, "sets": []}
        )

        assert response.status_code == 404

    def test_render_numeric_group_label_becomes_title(self, client):
        response = client.post(
            "/v1/styles/nested_details/render",
            json={"view": VIEW, "sets": [{"group": 2024, "level": 0, "rows": [{"id": 1}]}]},
        )

        assert response.status_code == 200
        assert response.json()["nodes"][0]["title"] == "2024"

    @pytest.mark.parametrize(
        "bad_set",
        [
            {"group": "A", "level": -1, "rows": []},
            {"group": "A", "rows": ["plain-string-row"]},
            {"group": "A", "rows": [{"group": "x", "rows": []}, 5]},
            {"group": "A", "rows": [{"group": "x", "rows": []}, {"id": 1}]},
        ],
    )
    def test_render_malformed_set_is_422(self, client, bad_set):
        response = client.post(
            "/v1/styles/nested_details/render",
            json={"view": VIEW, "sets": [bad_set]},
        )

        assert response.status_code == 422
