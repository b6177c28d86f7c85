"""Tests for Remez request validation."""

import pytest

from torchremez.filter_design import (
    FilterDesignError,
    SpecMismatchError,
    ValidationError,
    normalize_specification,
    symmetry_class,
)

LOWPASS = ([0.0, 0.4, 0.6, 1.0], [1.0, 1.0, 0.0, 0.0])


class TestNormalizeSpecification:
    """Tests for normalize_specification."""

    def test_defaults_resolved(self) -> None:
        """Weights and grid density get their defaults."""
        result = normalize_specification(20, *LOWPASS)

        assert result.ok
        assert result.error is None
        assert result.warning is None

        specification = result.specification
        assert specification.order == 20
        assert specification.weights == (1.0, 1.0)
        assert specification.grid_density == 16
        assert specification.num_taps == 21
        assert specification.symmetry.filter_class == 1

    def test_values_are_canonicalized(self) -> None:
        """Integer inputs become float tuples."""
        result = normalize_specification(
            20, [0, 0.4, 0.6, 1], [1, 1, 0, 0], weights=[1, 5]
        )

        specification = result.specification
        assert specification.bands == (0.0, 0.4, 0.6, 1.0)
        assert specification.amplitudes == (1.0, 1.0, 0.0, 0.0)
        assert specification.weights == (1.0, 5.0)
        assert all(isinstance(w, float) for w in specification.weights)

    def test_order_increment_for_odd_highpass(self) -> None:
        """Odd-order regular filter with gain at Nyquist gains one tap."""
        result = normalize_specification(
            21, [0.0, 0.4, 0.6, 1.0], [0.0, 0.0, 1.0, 1.0]
        )

        assert result.ok
        assert result.specification.order == 22
        assert result.specification.symmetry.filter_class == 1
        assert "increased" in result.warning

    def test_no_increment_with_zero_nyquist_gain(self) -> None:
        """Odd-order lowpass keeps its order."""
        result = normalize_specification(21, *LOWPASS)

        assert result.specification.order == 21
        assert result.warning is None

    @pytest.mark.parametrize("filter_type", ["hilbert", "differentiator"])
    def test_no_increment_for_antisymmetric(self, filter_type) -> None:
        """The Nyquist rule does not apply to antisymmetric filters."""
        result = normalize_specification(
            21, [0.1, 1.0], [1.0, 1.0], filter_type
        )

        assert result.specification.order == 21
        assert result.warning is None

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"order": 2}, "order must be at least 3"),
            ({"order": 20.5}, "order must be an integer"),
            ({"order": True}, "order must be an integer"),
            ({"bands": [0.0, 0.4, 0.6]}, "even length"),
            ({"bands": []}, "even length"),
            ({"bands": [-0.1, 0.4, 0.6, 1.0]}, "between 0 and 1"),
            ({"bands": [0.0, 0.4, 0.6, 1.5]}, "between 0 and 1"),
            ({"bands": [0.0, 0.6, 0.4, 1.0]}, "monotonically increasing"),
            ({"bands": [0.5, 0.5], "amplitudes": [1, 1]}, "non-zero width"),
            ({"weights": [1.0]}, "Number of weights"),
            ({"weights": [1.0, 0.0]}, "strictly positive"),
            ({"weights": [1.0, -2.0]}, "strictly positive"),
            ({"grid_density": 0}, "grid_density"),
            ({"grid_density": 2.5}, "grid_density"),
            ({"filter_type": "lowpass"}, "filter_type"),
        ],
    )
    def test_invalid_requests(self, kwargs, match) -> None:
        """Each violated constraint is reported as a ValidationError."""
        arguments = {
            "order": 20,
            "bands": LOWPASS[0],
            "amplitudes": LOWPASS[1],
        }
        arguments.update(kwargs)

        result = normalize_specification(**arguments)

        assert not result.ok
        assert result.specification is None
        assert isinstance(result.error, ValidationError)
        assert match in str(result.error)

    def test_amplitude_count_mismatch(self) -> None:
        """Amplitudes must match the band edges one to one."""
        result = normalize_specification(20, [0.0, 0.4, 0.6, 1.0], [1.0, 0.0])

        assert isinstance(result.error, SpecMismatchError)

    def test_adjacent_bands_with_different_amplitudes(self) -> None:
        """A shared edge with two desired values is ambiguous."""
        result = normalize_specification(
            20, [0.0, 0.3, 0.3, 0.5], [1.0, 1.0, 0.0, 0.0]
        )

        assert isinstance(result.error, SpecMismatchError)
        assert "share the edge" in str(result.error)

    def test_adjacent_bands_with_same_amplitude(self) -> None:
        """A shared edge with a single desired value is accepted."""
        result = normalize_specification(
            20, [0.0, 0.3, 0.3, 0.5], [1.0, 0.5, 0.5, 0.0]
        )

        assert result.ok

    def test_exception_hierarchy(self) -> None:
        """Validation errors are ValueErrors and FilterDesignErrors."""
        assert issubclass(ValidationError, ValueError)
        assert issubclass(ValidationError, FilterDesignError)
        assert issubclass(SpecMismatchError, ValidationError)


class TestSymmetryClass:
    """Tests for symmetry_class."""

    @pytest.mark.parametrize(
        "order, filter_type, filter_class, antisymmetric, sign",
        [
            (20, "regular", 1, False, 1),
            (21, "regular", 2, False, 1),
            (20, "hilbert", 3, True, 1),
            (31, "hilbert", 4, True, 1),
            (20, "differentiator", 3, True, -1),
            (21, "differentiator", 4, True, -1),
        ],
    )
    def test_linear_phase_type(
        self, order, filter_type, filter_class, antisymmetric, sign
    ) -> None:
        symmetry = symmetry_class(order, filter_type)

        assert symmetry.filter_class == filter_class
        assert symmetry.antisymmetric == antisymmetric
        assert symmetry.odd_length == (order % 2 == 0)
        assert symmetry.sign == sign

    @pytest.mark.parametrize(
        "order, filter_type, num_functions",
        [
            (20, "regular", 11),
            (21, "regular", 11),
            (20, "hilbert", 10),
            (31, "hilbert", 16),
        ],
    )
    def test_num_functions(self, order, filter_type, num_functions) -> None:
        symmetry = symmetry_class(order, filter_type)
        assert symmetry.num_functions(order + 1) == num_functions
