"""
Tests for the converter and algebra API endpoints.
"""

import logging
import pytest


class TestHealth:
    """Test service endpoints."""

    def test_health(self, client):
        """Health check reports healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestConverterAPI:
    """Test /api/convert endpoints."""

    def test_list_quantities(self, client):
        """All quantity kinds are listed."""
        response = client.get("/api/convert/quantities")
        assert response.status_code == 200
        data = response.json()
        assert "length" in data
        assert "temperature" in data
        assert "fuel-economy" in data

    def test_list_units(self, client):
        """Units are listed as value/label pairs."""
        response = client.get("/api/convert/length/units")
        assert response.status_code == 200
        data = response.json()
        assert {"value": "nautical-mile", "label": "Nautical Mile"} in data

    def test_convert_length(self, client):
        """Kilometers to meters."""
        response = client.post(
            "/api/convert/length",
            json={"value": 1, "from_unit": "kilometer", "to_unit": "meter"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["result"] == 1000
        assert data["formatted"] == "1000"
        assert data["quantity"] == "length"

    def test_convert_temperature(self, client):
        """Boiling point in Fahrenheit."""
        response = client.post(
            "/api/convert/temperature",
            json={"value": 100, "from_unit": "celsius", "to_unit": "fahrenheit"},
        )
        assert response.status_code == 200
        assert response.json()["result"] == 212

    def test_convert_fuel_economy_zero(self, client):
        """Zero fuel economy converts to zero."""
        response = client.post(
            "/api/convert/fuel-economy",
            json={"value": 0, "from_unit": "mpg-us", "to_unit": "liters-per-100km"},
        )
        assert response.status_code == 200
        assert response.json()["result"] == 0

    def test_formatted_precision(self, client):
        """Display strings use the configured significant digits."""
        response = client.post(
            "/api/convert/length",
            json={"value": 1, "from_unit": "meter", "to_unit": "foot"},
        )
        assert response.json()["formatted"] == "3.28084"

    def test_invalid_unit(self, client):
        """Unknown unit keys are a 400 naming the unit."""
        response = client.post(
            "/api/convert/length",
            json={"value": 1, "from_unit": "furlong", "to_unit": "meter"},
        )
        assert response.status_code == 400
        assert "furlong" in response.json()["detail"]

    def test_unknown_quantity(self, client):
        """Unknown quantities fail path validation."""
        response = client.post(
            "/api/convert/distance",
            json={"value": 1, "from_unit": "meter", "to_unit": "foot"},
        )
        assert response.status_code == 422

    def test_material_conversion(self, client):
        """Liters of water to kilograms."""
        response = client.post(
            "/api/convert/material",
            json={"value": 2, "from_unit": "liter", "to_unit": "kilogram", "material": "water"},
        )
        assert response.status_code == 200
        assert response.json()["result"] == pytest.approx(2)

    def test_material_unknown(self, client):
        """Unknown materials are a 400."""
        response = client.post(
            "/api/convert/material",
            json={"value": 2, "from_unit": "liter", "to_unit": "kilogram", "material": "lava"},
        )
        assert response.status_code == 400

    def test_list_materials(self, client):
        """Materials are listed with densities."""
        response = client.get("/api/convert/materials")
        assert response.status_code == 200
        assert any(m["value"] == "steel" for m in response.json())

    def test_ohms_law(self, client):
        """Voltage and resistance give current and power."""
        response = client.post(
            "/api/convert/ohms-law",
            json={"voltage": 9, "resistance": 3, "calculate": "current"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["current"] == pytest.approx(3)
        assert data["power"] == pytest.approx(27)

    def test_ohms_law_missing_values(self, client):
        """One known value is not enough."""
        response = client.post("/api/convert/ohms-law", json={"voltage": 9})
        assert response.status_code == 400


class TestAlgebraAPI:
    """Test /api/algebra endpoints."""

    def test_subtract_polynomials(self, client):
        """Subtraction distributes the sign."""
        response = client.post(
            "/api/algebra/polynomials/add-subtract",
            json={"poly1": "3x^2 + 2x - 5", "poly2": "x^2 - 7x + 2", "operation": "subtract"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["result"] == "2x^2 + 9x - 7"
        assert len(data["steps"]) == 4

    def test_polynomial_parse_error(self, client):
        """Malformed polynomials are a 400 naming the term."""
        response = client.post(
            "/api/algebra/polynomials/add-subtract",
            json={"poly1": "3y^2", "poly2": "x", "operation": "add"},
        )
        assert response.status_code == 400
        assert "3y^2" in response.json()["detail"]

    def test_polynomial_invalid_operation(self, client):
        """Operation must be add or subtract."""
        response = client.post(
            "/api/algebra/polynomials/add-subtract",
            json={"poly1": "x", "poly2": "x", "operation": "divide"},
        )
        assert response.status_code == 422

    def test_box_multiply(self, client):
        """Box method product and grid."""
        response = client.post(
            "/api/algebra/polynomials/multiply",
            json={"poly1": "x + 2", "poly2": "x^2 - 3x + 5"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["final_answer"] == "x^3 - x^2 - x + 10"
        assert data["box"]["row_headers"] == ["x", "2"]

    def test_bessel(self, client):
        """J0(1) and Y0(1)."""
        response = client.post("/api/algebra/bessel", json={"order": 0, "x": 1})
        assert response.status_code == 200
        data = response.json()
        assert data["j"] == pytest.approx(0.7651976866, abs=1e-7)
        assert data["y"] == pytest.approx(0.0882569642, abs=1e-7)
        assert data["y_singular"] is False

    def test_bessel_singular_y(self, client):
        """Y at x = 0 is reported as singular."""
        response = client.post("/api/algebra/bessel", json={"order": 2, "x": 0})
        assert response.status_code == 200
        data = response.json()
        assert data["j"] == 0
        assert data["y"] is None
        assert data["y_singular"] is True

    def test_bessel_negative_x(self, client):
        """Only J is defined for negative x."""
        response = client.post("/api/algebra/bessel", json={"order": 1, "x": -1})
        assert response.status_code == 200
        data = response.json()
        assert data["j"] == pytest.approx(-0.4400505857, abs=1e-7)
        assert data["y"] is None
        assert data["y_singular"] is False

    def test_bessel_order_too_high(self, client):
        """Orders above the stability bound are a 400."""
        response = client.post("/api/algebra/bessel", json={"order": 11, "x": 1})
        assert response.status_code == 400

    def test_binomial(self, client):
        """C(10, 3) = 120."""
        response = client.post("/api/algebra/binomial-coefficient", json={"n": 10, "k": 3})
        assert response.status_code == 200
        assert response.json()["result"] == 120

    def test_binomial_k_greater_than_n(self, client):
        """k > n is a 400."""
        response = client.post("/api/algebra/binomial-coefficient", json={"n": 3, "k": 10})
        assert response.status_code == 400

    def test_binomial_n_too_large(self, client):
        """n above the supported bound is a validation error, not a crash."""
        response = client.post(
            "/api/algebra/binomial-coefficient", json={"n": 20000, "k": 10000}
        )
        assert response.status_code == 422

    def test_absolute_value_rejection_is_logged(self, client, caplog):
        """A zero coefficient is a 400 and logged as a warning."""
        with caplog.at_level(logging.WARNING, logger="calckit.api.algebra"):
            response = client.post(
                "/api/algebra/absolute-value/inequality",
                json={"a": 0, "b": 1, "inequality": "<", "c": 2},
            )
        assert response.status_code == 400
        assert "Rejected absolute value inequality" in caplog.text

    def test_absolute_value_equation(self, client):
        """|2x - 1| = 7."""
        response = client.post(
            "/api/algebra/absolute-value/equation", json={"a": 2, "b": -1, "c": 7}
        )
        assert response.status_code == 200
        assert response.json()["solutions"] == [-3, 4]

    def test_absolute_value_equation_zero_a(self, client):
        """a = 0 is a 400."""
        response = client.post(
            "/api/algebra/absolute-value/equation", json={"a": 0, "b": 1, "c": 7}
        )
        assert response.status_code == 400

    def test_absolute_value_inequality(self, client):
        """|x| < 5."""
        response = client.post(
            "/api/algebra/absolute-value/inequality",
            json={"a": 1, "b": 0, "inequality": "<", "c": 5},
        )
        assert response.status_code == 200
        assert response.json()["interval"] == "(-5, 5)"
