# main.py
from taxi_park.app.build import build


def run(seed: int = 123):
    app = build(
        {
            "name": "demo",
            "run_id": f"demo-{seed}",
            "generator": {"seed": seed, "drivers": 10, "passengers": 25, "trips": 80},
        }
    )
    a = app.analytics

    a.fake_drivers()
    a.faithful_passengers(min_trips=5)
    for driver in sorted(app.park.all_drivers, key=lambda d: d.name):
        a.frequent_passengers(driver)
    a.smart_passengers()
    a.most_frequent_trip_duration_period()
    a.pareto_principle()


if __name__ == "__main__":
    run()
