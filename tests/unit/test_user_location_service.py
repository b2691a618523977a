"""
Unit tests for the user location service
"""
import pytest
from unittest.mock import AsyncMock

from user_location_api.mappers.user_location import LocationMissingError
from user_location_api.models import User
from user_location_api.services.user_location_service import UserLocationService


@pytest.mark.unit
class TestUserLocationService:
    """Test cases for UserLocationService"""

    @pytest.fixture
    def mock_repository(self):
        """Create a mocked user repository"""
        repository = AsyncMock()
        repository.get_all.return_value = []
        repository.get_by_id.return_value = None
        return repository

    @pytest.fixture
    def service(self, mock_repository):
        """Create service instance"""
        return UserLocationService(mock_repository)

    @pytest.mark.asyncio
    async def test_list_all_views_preserves_repository_order(self, service, mock_repository, paul, elton):
        mock_repository.get_all.return_value = [elton, paul]

        views = await service.list_all_views()

        assert [view.userId for view in views] == [2, 1]
        assert all(view.place == "St Petersburg" for view in views)
        mock_repository.get_all.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_all_views_empty(self, service):
        assert await service.list_all_views() == []

    @pytest.mark.asyncio
    async def test_get_view_by_id_found(self, service, mock_repository, paul):
        mock_repository.get_by_id.return_value = paul

        view = await service.get_view_by_id(1)

        assert view is not None
        assert view.userId == 1
        assert view.email == "paul@ryan.com"
        mock_repository.get_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_get_view_by_id_not_found(self, service, mock_repository):
        assert await service.get_view_by_id(9999) is None
        mock_repository.get_by_id.assert_awaited_once_with(9999)

    @pytest.mark.asyncio
    async def test_get_view_by_id_without_location(self, service, mock_repository):
        mock_repository.get_by_id.return_value = User(
            id=3, first_name="No", last_name="Place", email="no@place.com", password="x"
        )

        with pytest.raises(LocationMissingError):
            await service.get_view_by_id(3)
