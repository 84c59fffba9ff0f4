"""
UCSB Resources API — Menu Item Review Route Tests
==================================================

What:  HTTP-level tests for /api/ucsbmenuitemreview.
How:   Mock repository injected via dependency_overrides; tokens signed with
       the test secret.

What we test:
    ✅ Logged-out callers get 403 on every endpoint
    ✅ Users can list and fetch; only admins can create and update
    ✅ Exactly one repository call per request, none when access is denied
    ✅ Missing id returns the EntityNotFoundException body
    ✅ Malformed dates are rejected with 400
"""

from datetime import datetime

import pytest

from ucsb_api.models.menu_item_review import UCSBMenuItemReview

BASE = "/api/ucsbmenuitemreview"


def make_review(review_id, stars, date_reviewed):
    return UCSBMenuItemReview(
        id=review_id,
        item_id=1,
        stars=stars,
        reviewer_email="email@ucsb.edu",
        date_reviewed=datetime.fromisoformat(date_reviewed),
        comments="some-comment",
    )


class TestGetAll:

    @pytest.mark.asyncio
    async def test_logged_out_users_cannot_get_all(self, test_client, menu_item_review_repository):
        response = await test_client.get(f"{BASE}/all")

        assert response.status_code == 403
        assert response.json()["type"] == "AccessDeniedException"
        menu_item_review_repository.find_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_logged_in_users_can_get_all(self, test_client, user_headers):
        response = await test_client.get(f"{BASE}/all", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_logged_in_user_gets_reviews_in_repository_order(
        self, test_client, user_headers, menu_item_review_repository
    ):
        menu_item_review_repository.find_all.return_value = [
            make_review(1, 3, "2022-01-03T00:00:00"),
            make_review(2, 2, "2022-03-11T00:00:00"),
        ]

        response = await test_client.get(f"{BASE}/all", headers=user_headers)

        assert response.status_code == 200
        menu_item_review_repository.find_all.assert_awaited_once()
        assert response.json() == [
            {
                "id": 1,
                "itemId": 1,
                "reviewerEmail": "email@ucsb.edu",
                "stars": 3,
                "dateReviewed": "2022-01-03T00:00:00",
                "comments": "some-comment",
            },
            {
                "id": 2,
                "itemId": 1,
                "reviewerEmail": "email@ucsb.edu",
                "stars": 2,
                "dateReviewed": "2022-03-11T00:00:00",
                "comments": "some-comment",
            },
        ]

    @pytest.mark.asyncio
    async def test_json_fields_follow_entity_order(
        self, test_client, user_headers, menu_item_review_repository
    ):
        menu_item_review_repository.find_all.return_value = [
            make_review(1, 3, "2022-01-03T00:00:00"),
        ]

        response = await test_client.get(f"{BASE}/all", headers=user_headers)

        assert list(response.json()[0].keys()) == [
            "id", "itemId", "reviewerEmail", "stars", "dateReviewed", "comments",
        ]


class TestGetById:

    @pytest.mark.asyncio
    async def test_logged_out_users_cannot_get_by_id(self, test_client):
        response = await test_client.get(BASE, params={"id": 7})
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_user_can_get_existing_review(
        self, test_client, user_headers, menu_item_review_repository
    ):
        menu_item_review_repository.find_by_id.return_value = make_review(
            7, 5, "2022-01-03T00:00:00"
        )

        response = await test_client.get(BASE, params={"id": 7}, headers=user_headers)

        assert response.status_code == 200
        assert response.json()["id"] == 7
        assert response.json()["stars"] == 5
        menu_item_review_repository.find_by_id.assert_awaited_once_with(7)

    @pytest.mark.asyncio
    async def test_missing_review_returns_not_found(
        self, test_client, user_headers, menu_item_review_repository
    ):
        response = await test_client.get(BASE, params={"id": 7}, headers=user_headers)

        assert response.status_code == 404
        assert response.json() == {
            "type": "EntityNotFoundException",
            "message": "UCSBMenuItemReview with id 7 not found",
        }
        menu_item_review_repository.find_by_id.assert_awaited_once_with(7)


class TestPost:

    PARAMS = {
        "itemId": 1,
        "stars": 3,
        "reviewerEmail": "email@ucsb.edu",
        "dateReviewed": "2022-01-03T00:00:00",
        "comments": "some-comment",
    }

    @pytest.mark.asyncio
    async def test_logged_out_users_cannot_post(self, test_client, menu_item_review_repository):
        response = await test_client.post(f"{BASE}/post")

        assert response.status_code == 403
        menu_item_review_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_logged_in_regular_users_cannot_post(
        self, test_client, user_headers, menu_item_review_repository
    ):
        response = await test_client.post(f"{BASE}/post", params=self.PARAMS, headers=user_headers)

        assert response.status_code == 403
        menu_item_review_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_can_post_a_new_review(
        self, test_client, admin_headers, menu_item_review_repository
    ):
        async def persist(entity):
            entity.id = 17
            return entity

        menu_item_review_repository.save.side_effect = persist

        response = await test_client.post(f"{BASE}/post", params=self.PARAMS, headers=admin_headers)

        assert response.status_code == 200
        menu_item_review_repository.save.assert_awaited_once()
        saved = menu_item_review_repository.save.await_args.args[0]
        assert saved.item_id == 1
        assert saved.stars == 3
        assert saved.reviewer_email == "email@ucsb.edu"
        assert saved.date_reviewed == datetime(2022, 1, 3, 0, 0, 0)
        assert saved.comments == "some-comment"
        assert response.json() == {"id": 17, **self.PARAMS}

    @pytest.mark.asyncio
    async def test_malformed_date_is_rejected(
        self, test_client, admin_headers, menu_item_review_repository
    ):
        params = {**self.PARAMS, "dateReviewed": "last tuesday"}

        response = await test_client.post(f"{BASE}/post", params=params, headers=admin_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "ValidationError"
        assert "dateReviewed" in body["message"]
        menu_item_review_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_date_with_utc_offset_is_rejected(
        self, test_client, admin_headers, menu_item_review_repository
    ):
        params = {**self.PARAMS, "dateReviewed": "2022-01-03T00:00:00Z"}

        response = await test_client.post(f"{BASE}/post", params=params, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"
        assert "dateReviewed" in response.json()["message"]
        menu_item_review_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_parameter_is_rejected(self, test_client, admin_headers):
        params = {k: v for k, v in self.PARAMS.items() if k != "stars"}

        response = await test_client.post(f"{BASE}/post", params=params, headers=admin_headers)

        assert response.status_code == 400
        assert "stars" in response.json()["message"]


class TestPut:

    BODY = {
        "itemId": 4,
        "stars": 1,
        "reviewerEmail": "other@ucsb.edu",
        "dateReviewed": "2023-05-01T12:30:00",
        "comments": "cold fries",
    }

    @pytest.mark.asyncio
    async def test_logged_out_users_cannot_put(self, test_client, menu_item_review_repository):
        response = await test_client.put(BASE, params={"id": 1}, json=self.BODY)

        assert response.status_code == 403
        menu_item_review_repository.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_regular_users_cannot_put(self, test_client, user_headers):
        response = await test_client.put(
            BASE, params={"id": 1}, json=self.BODY, headers=user_headers
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_can_edit_an_existing_review(
        self, test_client, admin_headers, menu_item_review_repository
    ):
        original = make_review(1, 3, "2022-01-03T00:00:00")
        menu_item_review_repository.find_by_id.return_value = original

        response = await test_client.put(
            BASE, params={"id": 1}, json=self.BODY, headers=admin_headers
        )

        assert response.status_code == 200
        menu_item_review_repository.find_by_id.assert_awaited_once_with(1)
        menu_item_review_repository.save.assert_awaited_once_with(original)
        assert original.item_id == 4
        assert original.comments == "cold fries"
        assert response.json() == {"id": 1, **self.BODY}

    @pytest.mark.asyncio
    async def test_admin_cannot_edit_review_that_does_not_exist(
        self, test_client, admin_headers, menu_item_review_repository
    ):
        response = await test_client.put(
            BASE, params={"id": 67}, json=self.BODY, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "UCSBMenuItemReview with id 67 not found"
        menu_item_review_repository.save.assert_not_awaited()
