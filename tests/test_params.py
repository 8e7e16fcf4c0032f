from __future__ import annotations

import math

import numpy as np
import pytest

from paramstore.exceptions import FieldDecodeError, UnknownFieldError
from paramstore.params import (
    BoolParam,
    FloatArrayParam,
    FloatParam,
    IntParam,
    Param,
    Params,
    StringArrayParam,
)


class Knobs(Params):
    alpha = FloatParam("alpha", "step size", validator=lambda v: v > 0)
    n_iter = IntParam("n_iter", "number of iterations")
    verbose = BoolParam("verbose", "print progress")
    labels = StringArrayParam("labels", "label names")
    weights = FloatArrayParam("weights", "per-feature weights")
    anything = Param("anything", "untyped JSON value")

    def __init__(self, uid=None):
        super().__init__(uid)
        self._set_default(alpha=0.1, n_iter=10)


def test_random_uid_uses_class_name():
    k = Knobs()
    assert k.uid.startswith("Knobs_")
    assert Knobs().uid != k.uid


def test_uid_is_read_only():
    k = Knobs("fixed")
    assert k.uid == "fixed"
    with pytest.raises(AttributeError):
        k.uid = "other"


def test_params_are_sorted_and_resolvable():
    k = Knobs()
    assert [p.name for p in k.params] == ["alpha", "anything", "labels", "n_iter", "verbose", "weights"]
    assert k.get_param("alpha") is Knobs.alpha
    assert k.has_param("n_iter")
    assert not k.has_param("beta")


def test_unknown_param_raises():
    with pytest.raises(UnknownFieldError, match="beta"):
        Knobs().get_param("beta")


def test_set_get_and_defaults():
    k = Knobs()
    assert k.get_or_default("alpha") == 0.1
    assert k.has_default(k.alpha) and not k.is_set(k.alpha)

    k.set(k.alpha, 0.5)
    assert k.is_set("alpha")
    assert k.get_or_default(k.alpha) == 0.5
    assert k.get_default("alpha") == 0.1

    k.clear("alpha")
    assert k.get_or_default("alpha") == 0.1


def test_undefined_param_has_no_value():
    k = Knobs()
    assert not k.is_defined("verbose")
    with pytest.raises(KeyError):
        k.get_or_default("verbose")


def test_validator_rejects_on_set():
    with pytest.raises(ValueError, match="alpha"):
        Knobs().set("alpha", -1.0)


def test_extract_param_map_overlays_set_values():
    k = Knobs().set_params(alpha=0.3, verbose=True)
    assert k.extract_param_map() == {"alpha": 0.3, "n_iter": 10, "verbose": True}
    assert k.extract_param_map({"n_iter": 5})["n_iter"] == 5


def test_copy_keeps_uid_and_values():
    k = Knobs("k1").set_params(alpha=0.7)
    c = k.copy({"n_iter": 3})
    assert c is not k
    assert c.uid == "k1"
    assert c.get_or_default("alpha") == 0.7
    assert c.get_or_default("n_iter") == 3
    assert k.get_or_default("n_iter") == 10


def test_explain_params_mentions_defaults_and_current():
    text = Knobs().set_params(alpha=0.2).explain_params()
    assert "alpha: step size (default: 0.1, current: 0.2)" in text
    assert "verbose: print progress (undefined)" in text


def test_typed_codecs_encode_json():
    assert Knobs.alpha.json_encode(2.0) == "2.0"
    assert Knobs.n_iter.json_encode(3) == "3"
    assert Knobs.verbose.json_encode(True) == "true"
    assert Knobs.labels.json_encode(["a", "b"]) == '["a","b"]'
    assert Knobs.weights.json_encode(np.array([1.0, 2.5])) == "[1.0,2.5]"


def test_typed_codecs_decode():
    assert Knobs.alpha.json_decode("2") == 2.0
    assert isinstance(Knobs.alpha.json_decode("2"), float)
    assert Knobs.n_iter.json_decode("7") == 7
    assert Knobs.verbose.json_decode("false") is False
    assert Knobs.labels.json_decode('["x"]') == ["x"]
    np.testing.assert_array_equal(Knobs.weights.json_decode("[0.5,1]"), np.array([0.5, 1.0]))
    assert Knobs.anything.json_decode('{"a":[1,2]}') == {"a": [1, 2]}


@pytest.mark.parametrize(
    "param, text",
    [
        (Knobs.n_iter, '"7"'),
        (Knobs.n_iter, "7.5"),
        (Knobs.verbose, "1"),
        (Knobs.alpha, '"fast"'),
        (Knobs.alpha, "-1.0"),
        (Knobs.labels, '"a"'),
        (Knobs.weights, '["a"]'),
        (Knobs.anything, "{not json"),
    ],
)
def test_decode_rejects_bad_values(param, text):
    with pytest.raises(FieldDecodeError) as excinfo:
        param.json_decode(text)
    assert excinfo.value.field_name == param.name


def test_array_param_equality():
    assert Knobs.weights.values_equal(np.array([1.0, 2.0]), [1, 2])
    assert not Knobs.weights.values_equal(np.array([1.0, 2.0]), [1, 3])


def test_empty_uid_is_kept():
    assert Knobs("").uid == ""


@pytest.mark.parametrize(
    "name, value",
    [
        ("n_iter", 2.5),
        ("n_iter", "3"),
        ("alpha", "fast"),
        ("alpha", True),
        ("verbose", 1),
        ("labels", "a"),
        ("weights", [[1.0, 2.0]]),
        ("weights", ["a", "b"]),
        ("weights", [True, False]),
    ],
)
def test_set_rejects_values_of_the_wrong_type(name, value):
    with pytest.raises(ValueError, match=name):
        Knobs().set(name, value)


def test_non_finite_floats_encode_as_tokens():
    assert Knobs.alpha.json_encode(float("inf")) == '"Inf"'
    assert Knobs.alpha.json_encode(float("-inf")) == '"-Inf"'
    assert Knobs.alpha.json_encode(float("nan")) == '"NaN"'
    assert Knobs.weights.json_encode(np.array([1.0, np.inf, -np.inf, np.nan])) == '[1.0,"Inf","-Inf","NaN"]'


def test_non_finite_floats_decode_from_tokens():
    assert Knobs.alpha.json_decode('"Inf"') == float("inf")
    assert math.isnan(FloatParam("x").json_decode('"NaN"'))
    assert FloatParam("x").json_decode('"-Inf"') == float("-inf")
    decoded = Knobs.weights.json_decode('[1.0,"Inf","-Inf","NaN"]')
    assert np.array_equal(decoded, np.array([1.0, np.inf, -np.inf, np.nan]), equal_nan=True)


def test_nan_values_compare_equal_under_field_equality():
    assert FloatParam("x").values_equal(float("nan"), float("nan"))
    assert not FloatParam("x").values_equal(float("nan"), 1.0)
    assert Knobs.weights.values_equal(np.array([np.nan, 1.0]), [np.nan, 1.0])
