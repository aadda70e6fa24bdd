"""Tests for the public HTTP handlers."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from packleads.dependencies.contact import contact_service_dependency
from packleads.metadata import FAQ_STRUCTURED_DATA, Section

_CONTACT = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "subject": "Billing question",
    "message": "How do credit packs work?",
}


@pytest.mark.asyncio
async def test_robots(client: AsyncClient) -> None:
    r = await client.get("/robots.txt")
    assert r.status_code == 200
    assert r.headers["Content-Type"].startswith("text/plain")
    lines = r.text.splitlines()
    assert lines[0] == "User-Agent: *"
    assert "Allow: /" in lines
    assert "Disallow: /pipeline" in lines
    assert lines[-1] == "Sitemap: https://example.com/sitemap.xml"


@pytest.mark.asyncio
async def test_sitemap(client: AsyncClient) -> None:
    r = await client.get("/sitemap.xml")
    assert r.status_code == 200
    assert r.headers["Content-Type"].startswith("application/xml")
    assert "<loc>https://example.com/pricing</loc>" in r.text
    assert "<loc>https://example.com/dashboard</loc>" not in r.text


@pytest.mark.asyncio
async def test_list_pages(client: AsyncClient) -> None:
    r = await client.get("/api/pages")
    assert r.status_code == 200
    pages = r.json()
    assert [p["section"] for p in pages] == [s.value for s in Section]
    for page in pages:
        assert page["metadata"]["title"]
        assert page["metadata"]["description"]
    dashboard = next(p for p in pages if p["section"] == "dashboard")
    assert dashboard["path"] == "/dashboard"
    assert dashboard["metadata"]["robots"] == {"index": False, "follow": False}
    assert "alternates" not in dashboard["metadata"]


@pytest.mark.asyncio
async def test_get_page(client: AsyncClient) -> None:
    r = await client.get("/api/pages/pricing")
    assert r.status_code == 200
    assert r.json() == {
        "section": "pricing",
        "path": "/pricing",
        "metadata": {
            "title": "Pricing",
            "description": (
                "Simple, transparent pricing for Scoutblind. Start free with 5"
                " credits. Scale with Starter ($29/mo) or Pro ($79/mo) plans."
            ),
            "alternates": {"canonical": "/pricing"},
        },
        "structuredData": [],
    }


@pytest.mark.asyncio
async def test_get_faq_page(client: AsyncClient) -> None:
    r = await client.get("/api/pages/faq")
    assert r.status_code == 200
    data = r.json()
    assert data["metadata"]["alternates"] == {"canonical": "/faq"}
    assert data["structuredData"] == [FAQ_STRUCTURED_DATA]


@pytest.mark.asyncio
async def test_get_unknown_page(client: AsyncClient) -> None:
    r = await client.get("/api/pages/history")
    assert r.status_code == 404
    assert r.json() == {
        "detail": [
            {
                "msg": "Unknown page history",
                "type": "unknown_page",
                "loc": ["path", "section"],
            }
        ]
    }


@pytest.mark.asyncio
async def test_contact(client: AsyncClient) -> None:
    r = await client.post(
        "/api/contact", json=_CONTACT, headers={"X-Real-IP": "10.0.0.1"}
    )
    assert r.status_code == 200
    assert r.json() == {"success": True}

    submissions = await contact_service_dependency.store.list_submissions()
    assert len(submissions) == 1
    assert submissions[0].client_ip == "10.0.0.1"
    assert submissions[0].subject == "Billing question"


@pytest.mark.asyncio
async def test_contact_invalid(client: AsyncClient) -> None:
    r = await client.post(
        "/api/contact", json={**_CONTACT, "email": "not-an-email"}
    )
    assert r.status_code == 422
    assert r.json()["detail"][0]["loc"] == ["body", "email"]

    r = await client.post("/api/contact", json={**_CONTACT, "message": "  "})
    assert r.status_code == 422

    submissions = await contact_service_dependency.store.list_submissions()
    assert submissions == []


@pytest.mark.asyncio
async def test_contact_rate_limit(client: AsyncClient) -> None:
    headers = {"X-Forwarded-For": "10.0.0.1"}
    for _ in range(3):
        r = await client.post("/api/contact", json=_CONTACT, headers=headers)
        assert r.status_code == 200

    r = await client.post("/api/contact", json=_CONTACT, headers=headers)
    assert r.status_code == 429
    assert r.json() == {
        "detail": [
            {
                "msg": "Too many submissions. Please try again later.",
                "type": "rate_limited",
            }
        ]
    }

    # Invalid submissions from the limited client are still rejected as
    # invalid, and other clients are unaffected.
    r = await client.post(
        "/api/contact",
        json={**_CONTACT, "name": ""},
        headers=headers,
    )
    assert r.status_code == 422
    r = await client.post(
        "/api/contact", json=_CONTACT, headers={"X-Forwarded-For": "10.0.0.2"}
    )
    assert r.status_code == 200

    submissions = await contact_service_dependency.store.list_submissions()
    assert len(submissions) == 4
