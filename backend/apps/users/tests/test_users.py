from decimal import Decimal

from django.test import override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class TestUsers(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            email="crio-user@gmail.com", password="learnCode1", name="crio-user"
        )
        self.other = User.objects.create_user(
            email="crio-other@gmail.com", password="learnCode1", name="crio-other"
        )
        self.detail_url = lambda uid: f"/api/users/{uid}/"

    def test_new_user_gets_defaults(self):
        self.assertEqual(self.user.wallet_money, Decimal("500"))
        self.assertEqual(self.user.address, "ADDRESS_NOT_SET")
        self.assertFalse(self.user.has_set_non_default_address())

    @override_settings(DEFAULT_ADDRESS="NOT_SET_YET")
    def test_sentinel_follows_settings(self):
        user = User.objects.create_user(email="x@gmail.com", password="learnCode1", name="x")
        self.assertEqual(user.address, "NOT_SET_YET")
        self.assertFalse(user.has_set_non_default_address())

    def test_requires_authentication(self):
        res = self.client.get(self.detail_url(self.user.id))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data["error"]["code"], "UNAUTHORIZED")

    def test_get_own_profile(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.get(self.detail_url(self.user.id))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["email"], "crio-user@gmail.com")
        self.assertEqual(res.data["walletMoney"], Decimal("500.00"))

    def test_get_address_only(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.get(self.detail_url(self.user.id), {"q": "address"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"address": "ADDRESS_NOT_SET"})

    def test_cannot_read_other_user(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.get(self.detail_url(self.other.id))
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(
            res.data["error"]["message"], "User not authorized to access this resource"
        )

    def test_missing_user_is_not_found(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.get(self.detail_url(9999))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_set_address(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.put(
            self.detail_url(self.user.id),
            {"address": "128 Residency Road, Bengaluru"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"address": "128 Residency Road, Bengaluru"})
        self.user.refresh_from_db()
        self.assertTrue(self.user.has_set_non_default_address())

    def test_set_address_rejects_blank(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.put(self.detail_url(self.user.id), {"address": "  "}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "VALIDATION_ERROR")
