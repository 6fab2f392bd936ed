import pytest

from route_generator import generate_loop_routes, generate_loop_routes_for_distance
from utils.geo import build_fallback_loop, build_loop_variations
from stubs import StubClient, make_route


def test_all_variations_succeed(start):
    routes = [make_route(distance=d) for d in (2600.0, 2400.0, 2550.0)]
    client = StubClient(routes)

    result = generate_loop_routes(start, 30, client)

    assert result == routes  # square, triangle, hex order kept
    assert len(client.calls) == 3  # fallback never attempted


def test_variations_requested_in_order(start, route):
    lon, lat = start
    client = StubClient(route)

    generate_loop_routes(start, 30, client)

    assert client.calls == build_loop_variations(lat, lon, 2.5)


def test_partial_failure_keeps_successes_in_order(start):
    square, hexagon = make_route(distance=2600.0), make_route(distance=2550.0)
    client = StubClient([square, None, hexagon])

    assert generate_loop_routes(start, 30, client) == [square, hexagon]
    assert len(client.calls) == 3


def test_all_fail_then_fallback_fails(start):
    client = StubClient(None)

    assert generate_loop_routes(start, 30, client) == []
    assert len(client.calls) == 4


def test_all_fail_then_fallback_succeeds(start, route):
    lon, lat = start
    client = StubClient([None, None, None, route])

    assert generate_loop_routes(start, 30, client) == [route]
    assert len(client.calls) == 4
    assert client.calls[-1] == build_fallback_loop(lon, lat, 2.5)


def test_no_state_between_calls(start, route):
    failing = StubClient(None)
    working = StubClient(route)

    assert generate_loop_routes(start, 30, failing) == []
    assert len(generate_loop_routes(start, 30, working)) == 3
    assert len(generate_loop_routes(start, 30, working)) == 3
    assert len(working.calls) == 6


@pytest.mark.parametrize("minutes", [0, -10, 10000])
def test_out_of_range_durations_are_not_rejected(start, route, minutes):
    client = StubClient(route)
    assert len(generate_loop_routes(start, minutes, client)) == 3


def test_generate_for_distance_uses_walking_speed(start, route):
    lon, lat = start
    by_distance = StubClient(route)
    by_duration = StubClient(route)

    generate_loop_routes_for_distance(start, 5.0, by_distance)
    generate_loop_routes(start, 60, by_duration)

    assert by_distance.calls == by_duration.calls
    assert by_distance.calls[0][1] == pytest.approx((lon, lat + 1.25 / 111))


class RaisingClient(StubClient):
    """Raises on the calls whose answer is an exception instance."""

    def request_route(self, loop):
        answer = super().request_route(loop)
        if isinstance(answer, Exception):
            raise answer
        return answer


def test_client_error_on_one_variation_keeps_the_others(start):
    square, hexagon = make_route(distance=2600.0), make_route(distance=2550.0)
    client = RaisingClient([square, RuntimeError("boom"), hexagon])

    assert generate_loop_routes(start, 30, client) == [square, hexagon]
    assert len(client.calls) == 3


def test_client_errors_everywhere_still_try_fallback(start, route):
    client = RaisingClient([RuntimeError("boom")] * 3 + [route])

    assert generate_loop_routes(start, 30, client) == [route]
    assert len(client.calls) == 4


def test_client_that_always_raises_gives_no_routes(start):
    client = RaisingClient(RuntimeError("boom"))

    assert generate_loop_routes(start, 30, client) == []
    assert len(client.calls) == 4
