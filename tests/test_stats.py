from datetime import date, datetime, timedelta, timezone

from walk30.models import Activity
from walk30.stats import activity_day, compute_stats, current_streak, round_half_up
from walk30.services.activities import get_user_stats
from conftest import TODAY, add_activity, create_user


def walk(day: date, minutes: int, hour: int = 9) -> Activity:
    return Activity(user_id="u1", date=datetime(day.year, day.month, day.day, hour, tzinfo=timezone.utc), minutes=minutes)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


def test_no_activities_gives_zero_stats():
    stats = compute_stats([], TODAY)
    assert stats.total_minutes == 0
    assert stats.current_streak == 0
    assert stats.days_active == 0
    assert stats.daily_average == 0


def test_streak_stops_at_first_gap():
    # Today, yesterday, two days ago, then a gap before four days ago
    activities = [walk(days_ago(0), 30), walk(days_ago(1), 30), walk(days_ago(2), 30), walk(days_ago(4), 30)]
    stats = compute_stats(activities, TODAY)
    assert stats.current_streak == 3
    assert stats.days_active == 4


def test_streak_can_end_yesterday():
    assert current_streak([days_ago(1), days_ago(2)], TODAY) == 2


def test_streak_broken_when_last_walk_older_than_yesterday():
    assert current_streak([days_ago(2), days_ago(3), days_ago(4)], TODAY) == 0


def test_streak_broken_when_last_walk_is_in_the_future():
    days = [TODAY + timedelta(days=1), TODAY, days_ago(1)]
    assert current_streak(days, TODAY) == 0


def test_same_day_counts_once_for_days_but_fully_for_minutes():
    activities = [walk(TODAY, 20, hour=7), walk(TODAY, 25, hour=18), walk(days_ago(1), 15)]
    stats = compute_stats(activities, TODAY)
    assert stats.total_minutes == 60
    assert stats.days_active == 2
    assert stats.current_streak == 2
    assert stats.daily_average == 30


def test_daily_average_over_three_days():
    activities = [walk(days_ago(0), 20), walk(days_ago(5), 30), walk(days_ago(9), 40)]
    stats = compute_stats(activities, TODAY)
    assert stats.total_minutes == 90
    assert stats.days_active == 3
    assert stats.daily_average == 30


def test_daily_average_rounds_half_up():
    assert round_half_up(25, 2) == 13
    assert round_half_up(5, 2) == 3
    assert round_half_up(10, 3) == 3
    assert round_half_up(10, 0) == 0


def test_activity_day_truncates_in_utc():
    aware = datetime(2026, 3, 15, 1, 30, tzinfo=timezone(timedelta(hours=5)))
    assert activity_day(aware) == date(2026, 3, 14)
    assert activity_day(datetime(2026, 3, 15, 23, 59)) == date(2026, 3, 15)


def test_get_user_stats_reads_only_that_users_activities(session):
    create_user(session, "walker")
    create_user(session, "other")
    add_activity(session, "walker", days_ago(0), 45)
    add_activity(session, "walker", days_ago(1), 15)
    add_activity(session, "other", days_ago(0), 500)

    stats = get_user_stats(session, "walker", TODAY)
    assert stats.total_minutes == 60
    assert stats.current_streak == 2
    assert stats.days_active == 2
    assert stats.daily_average == 30


def test_stats_endpoint(auth_client, session, user):
    add_activity(session, user.id, days_ago(0), 30)
    add_activity(session, user.id, days_ago(1), 30)
    add_activity(session, user.id, days_ago(2), 30)
    add_activity(session, user.id, days_ago(4), 30)

    response = auth_client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {
        "totalMinutes": 120,
        "currentStreak": 3,
        "daysActive": 4,
        "dailyAverage": 30,
    }


def test_stats_endpoint_without_activities(auth_client):
    response = auth_client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {
        "totalMinutes": 0,
        "currentStreak": 0,
        "daysActive": 0,
        "dailyAverage": 0,
    }
