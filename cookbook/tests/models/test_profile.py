from unittest.mock import patch
from urllib.parse import parse_qs, urlparse

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase

from cookbook.models.profile import avatar_upload_path
from cookbook.tests.helpers import make_user


class ProfileModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user("johndoe")
        self.profile = self.user.profile

    def test_display_name_blank_by_default(self):
        self.assertEqual(self.profile.display_name, "")

    def test_display_name_is_stripped(self):
        self.profile.username = "  Johnny  "
        self.assertEqual(self.profile.display_name, "Johnny")

    def test_str_uses_display_name(self):
        self.profile.username = "Johnny"
        self.assertEqual(str(self.profile), "Johnny")

    def test_str_without_display_name(self):
        self.assertEqual(str(self.profile), f"profile {self.user.pk}")

    def test_gravatar_is_built_from_owner_email(self):
        url = self.profile.gravatar(size=60)
        self.assertTrue(url.startswith("https://www.gravatar.com/avatar/"))
        query = parse_qs(urlparse(url).query)
        self.assertEqual(query.get("size", query.get("s")), ["60"])

    def test_avatar_falls_back_to_gravatar(self):
        with patch.object(self.profile, "gravatar", return_value="gravatar-url") as mock_method:
            self.assertEqual(self.profile.avatar_url, "gravatar-url")
        mock_method.assert_called_once_with(size=200)

    def test_mini_avatar_uses_smaller_size(self):
        with patch.object(self.profile, "gravatar", return_value="mini-url") as mock_method:
            self.assertEqual(self.profile.mini_avatar_url, "mini-url")
        mock_method.assert_called_once_with(size=60)

    def test_uploaded_avatar_wins_over_gravatar(self):
        self.profile.avatar = "avatars/1/me.png"
        self.assertTrue(self.profile.avatar_url.endswith("avatars/1/me.png"))

    def test_avatar_upload_path_is_per_user(self):
        path = avatar_upload_path(self.profile, "folder/me.png")
        self.assertTrue(path.startswith(f"avatars/{self.user.pk}/"))
        self.assertTrue(path.endswith("_me.png"))
