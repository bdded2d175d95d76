import pytest
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from marketplace.tests.factories import AdminFactory, SellerUserFactory, UserFactory
from utils.logging_utils import mask_email
from utils.rbac import ROLE_ADMIN, ROLE_CUSTOMER, ROLE_SELLER, current_role
from utils.service_base import ErrorCodes, ServiceResult, error_response_data, service_err, service_ok, status_for


@pytest.mark.unit
class TestServiceResult:
    def test_ok(self):
        result = service_ok({"order_id": "ORD1"})

        assert result == ServiceResult(ok=True, value={"order_id": "ORD1"})

    def test_err_detail_defaults_to_code(self):
        result = service_err(ErrorCodes.ORDER_NOT_FOUND)

        assert not result.ok
        assert result.error_detail == ErrorCodes.ORDER_NOT_FOUND

    def test_error_body_and_status(self):
        stock = service_err(ErrorCodes.INSUFFICIENT_STOCK, "Stock insufficient for some items", [{"available": 1}])
        missing = service_err(ErrorCodes.VALIDATION_ERROR, "Missing required fields", {"missing": ["total"]})

        assert error_response_data(stock) == {
            "message": "Stock insufficient for some items",
            "details": [{"available": 1}],
        }
        assert error_response_data(missing) == {"message": "Missing required fields", "missing": ["total"]}
        assert status_for(missing) == 400
        assert status_for(service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")) == 404
        assert status_for(service_err("SOMETHING_NEW", "?")) == 500


@pytest.mark.unit
class TestMaskEmail:
    def test_keeps_domain(self):
        assert mask_email("ravi.kumar@example.com") == "ra***@example.com"

    def test_empty_local_part(self):
        assert mask_email("@example.com") == "***@example.com"


class CurrentRoleTest(TestCase):
    def test_roles_come_from_the_database(self):
        customer = UserFactory()
        seller = SellerUserFactory()

        self.assertEqual(current_role(customer), ROLE_CUSTOMER)
        self.assertEqual(current_role(seller), ROLE_SELLER)
        self.assertEqual(current_role(AdminFactory()), ROLE_ADMIN)

        customer.role = ROLE_ADMIN
        self.assertEqual(current_role(customer), ROLE_CUSTOMER)

    def test_superuser_is_admin(self):
        self.assertEqual(current_role(UserFactory(is_superuser=True)), ROLE_ADMIN)

    def test_anonymous(self):
        self.assertIsNone(current_role(AnonymousUser()))
