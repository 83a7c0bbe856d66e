"""Basic usage of the telemetry core: browse a season and one driver's laps."""

import asyncio

from f1telemetry import F1TelemetryApp


async def main() -> None:
    async with F1TelemetryApp() as app:
        # Sessions of 2024, grouped by Grand Prix weekend
        print("=== 2024 Meetings ===")
        sessions = app.session_list(2024)
        await sessions.load()
        if sessions.has_error:
            print(f"  {sessions.error_message}")
            return
        for group in sessions.groups[:5]:
            names = ", ".join(s.session_name or "?" for s in group.sessions)
            print(f"  {group.meeting_name} ({group.formatted_date}): {names}")

        # Only race sessions
        sessions.apply_filter("race")
        race = next((s for g in sessions.groups for s in g.sessions if s.session_name == "Race"), None)
        if race is None or race.session_key is None:
            print("  No race session found.")
            return

        print(f"\n=== {race.location} Race (session_key={race.session_key}) ===")
        detail = app.session_detail(race.session_key)
        await detail.load()
        for d in detail.drivers:
            print(f"  #{d.driver_number} {d.full_name} - {d.team_name}")
        if detail.current_weather is not None:
            w = detail.current_weather
            print(f"  Weather: {w.condition}, air {w.air_temperature}°C, track {w.track_temperature}°C")

        # Lap analysis for the winner, or car #1 as a fallback
        driver_number = detail.classification[0].driver_number if detail.classification else 1
        telemetry = app.telemetry(race.session_key, driver_number or 1)
        await telemetry.load()
        print(f"\n=== {telemetry.title} ===")
        stats = telemetry.statistics
        print(f"  Fastest: {stats.fastest_lap_formatted}  Average: {stats.average_lap_formatted}")
        print(f"  Laps: {stats.total_lap_count}")

        if stats.fastest_lap is not None:
            await telemetry.select_lap(stats.fastest_lap)
            top = max((e.value for e in telemetry.telemetry_series), default=0)
            print(f"  Top speed on fastest lap: {top:.0f} km/h")


if __name__ == "__main__":
    asyncio.run(main())
