"""Tests for UserService."""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from core.exceptions import UserNotFound
from core.services.user_service import UserService


class TestGetUserById:
    """Tests for get_user_by_id."""

    def test_found(self) -> None:
        """Returns the user with a string id."""
        user_id = ObjectId()
        repo = MagicMock()
        repo.find_by_id.return_value = {'_id': user_id, 'email': 'a@b.com'}
        user = UserService(user_repo=repo).get_user_by_id(user_id)
        assert user['id'] == str(user_id)

    def test_not_found(self) -> None:
        """Missing users raise UserNotFound with status 404."""
        repo = MagicMock()
        repo.find_by_id.return_value = None
        with pytest.raises(UserNotFound) as exc_info:
            UserService(user_repo=repo).get_user_by_id('missing')
        assert exc_info.value.status_code == 404
        assert exc_info.value.to_dict()['error'] == 'USER_NOT_FOUND'
