"""Cross-type conversions and algebraic laws for Option, Result and Either."""

from hypothesis import given
from klaw_fp import (
    Either,
    Err,
    Lazy,
    Left,
    Nothing,
    Ok,
    Option,
    Result,
    Right,
    Some,
    err,
    left,
    option_from,
    result_from,
    right,
    some,
)

from tests.strategies import (
    eithers,
    either_functions,
    int_functions,
    integers,
    option_functions,
    options,
    result_functions,
    results,
)


def _identity(x):
    return x


class TestFunctorLaws:
    """map preserves identity and composition."""

    @given(options)
    def test_option_identity(self, opt: Option[int]):
        assert opt.map(_identity) == opt

    @given(results)
    def test_result_identity(self, r: Result[int, str]):
        assert r.map(_identity) == r

    @given(eithers)
    def test_either_identity(self, e: Either[str, int]):
        assert e.map(_identity) == e

    @given(options, int_functions, int_functions)
    def test_option_composition(self, opt, f, g):
        assert opt.map(f).map(g) == opt.map(lambda x: g(f(x)))

    @given(results, int_functions, int_functions)
    def test_result_composition(self, r, f, g):
        assert r.map(f).map(g) == r.map(lambda x: g(f(x)))

    @given(eithers, int_functions, int_functions)
    def test_either_composition(self, e, f, g):
        assert e.map(f).map(g) == e.map(lambda x: g(f(x)))


class TestMonadLaws:
    """flat_map obeys left identity, right identity and associativity."""

    @given(integers, option_functions)
    def test_option_left_identity(self, x, f):
        assert Some(x).flat_map(f) == f(x)

    @given(options)
    def test_option_right_identity(self, opt):
        assert opt.flat_map(Some) == opt

    @given(options, option_functions, option_functions)
    def test_option_associativity(self, opt, f, g):
        assert opt.flat_map(f).flat_map(g) == opt.flat_map(lambda x: f(x).flat_map(g))

    @given(integers, result_functions)
    def test_result_left_identity(self, x, f):
        assert Ok(x).flat_map(f) == f(x)

    @given(results)
    def test_result_right_identity(self, r):
        assert r.flat_map(Ok) == r

    @given(results, result_functions, result_functions)
    def test_result_associativity(self, r, f, g):
        assert r.flat_map(f).flat_map(g) == r.flat_map(lambda x: f(x).flat_map(g))

    @given(integers, either_functions)
    def test_either_left_identity(self, x, f):
        assert Right(x).flat_map(f) == f(x)

    @given(eithers)
    def test_either_right_identity(self, e):
        assert e.flat_map(Right) == e

    @given(eithers, either_functions, either_functions)
    def test_either_associativity(self, e, f, g):
        assert e.flat_map(f).flat_map(g) == e.flat_map(lambda x: f(x).flat_map(g))


class TestRoundTrips:
    """Conversions between the containers keep the success value."""

    @given(integers)
    def test_option_result_option(self, x):
        assert Some(x).to_result(lambda: 'missing').to_option() == Some(x)

    @given(integers)
    def test_result_either_result(self, x):
        assert Ok(x).to_either().to_result(str) == Ok(x)

    @given(integers)
    def test_either_result_either(self, x):
        assert Right(x).to_result(str).to_either() == Right(x)

    @given(integers)
    def test_result_option_result(self, x):
        assert Ok(x).to_option().to_result(lambda: 'missing') == Ok(x)

    def test_err_either_result_keeps_error(self):
        assert Err('e').to_either().to_result(_identity) == Err('e')

    def test_nothing_either_option(self):
        assert Nothing.to_either(lambda: 'missing').to_option() == Nothing

    def test_left_to_option_discards_error(self):
        assert Left('e').to_option() == Nothing


class TestScenarios:
    """End-to-end usage across the types."""

    def test_parse_pipeline(self):
        def parse(text: str) -> Result[int, str]:
            return result_from(lambda: int(text), lambda exc: f'not a number: {text!r}')

        def positive(n: int) -> Result[int, str]:
            return Ok(n) if n > 0 else err('must be positive')

        assert parse('5').flat_map(positive).map(lambda n: n * 2) == Ok(10)
        assert parse('-1').flat_map(positive) == Err('must be positive')
        assert parse('x').flat_map(positive) == Err("not a number: 'x'")

    def test_lookup_with_defaults(self):
        settings = {'port': '8080'}

        def setting(key: str) -> Option[str]:
            return option_from(lambda: settings[key])

        assert setting('port').map(int).get_or_else(lambda: 80) == 8080
        assert setting('host').get_or_else(lambda: 'localhost') == 'localhost'

    def test_either_branching(self):
        def classify(n: int) -> Either[str, int]:
            return right(n) if n % 2 == 0 else left(f'{n} is odd')

        outcomes = [classify(n).fold(lambda msg: msg, lambda v: v // 2) for n in (2, 3)]
        assert outcomes == [1, '3 is odd']

    def test_lazy_into_result_chain(self):
        config = Lazy(lambda: {'retries': '3'})
        retries = config.map(lambda c: int(c['retries'])).to_result()
        assert retries == Ok(3)

        missing = config.map(lambda c: c['timeout']).to_result().map_err(type)
        assert missing == Err(KeyError)

    def test_some_to_either_pipeline(self):
        assert some(2).to_either(lambda: 'none').map(lambda x: x + 1) == Right(3)
