"""
Unit tests for the user location mapper
"""
import pytest

from user_location_api.mappers.user_location import DataIntegrityError, LocationMissingError, to_view
from user_location_api.models import User
from user_location_api.schemas.user_location import UserLocationView


@pytest.mark.unit
class TestToView:
    """Test cases for to_view"""

    def test_copies_user_and_location_fields(self, paul):
        view = to_view(paul)

        assert view == UserLocationView(
            userId=1,
            email="paul@ryan.com",
            place="St Petersburg",
            longitude=40.5,
            latitude=30.6
        )

    def test_serializes_to_flat_shape(self, paul):
        assert to_view(paul).model_dump() == {
            "userId": 1,
            "email": "paul@ryan.com",
            "place": "St Petersburg",
            "longitude": 40.5,
            "latitude": 30.6
        }

    def test_mapping_is_repeatable_and_leaves_input_untouched(self, paul):
        first = to_view(paul)
        second = to_view(paul)

        assert first == second
        assert paul.email == "paul@ryan.com"
        assert paul.location.place == "St Petersburg"

    def test_users_sharing_a_location_share_coordinates(self, paul, elton):
        paul_view, elton_view = to_view(paul), to_view(elton)

        assert paul_view.userId != elton_view.userId
        assert paul_view.email != elton_view.email
        assert (paul_view.place, paul_view.latitude, paul_view.longitude) == \
            (elton_view.place, elton_view.latitude, elton_view.longitude)

    def test_missing_location_raises(self):
        user = User(id=7, first_name="No", last_name="Place", email="no@place.com", password="x")

        with pytest.raises(LocationMissingError) as exc_info:
            to_view(user)

        assert exc_info.value.user_id == 7
        assert isinstance(exc_info.value, DataIntegrityError)
        assert "User 7 has no location" in str(exc_info.value)
