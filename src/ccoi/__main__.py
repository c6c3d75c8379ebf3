import sys
from pathlib import Path


def run_speakers():
    """Print the speaker directory to stdout."""
    from ccoi.data_loader import DataLoader
    from ccoi.directory import group_by_letter

    loader = DataLoader()
    speakers = loader.get_speakers()
    print(f"CCOI Asia 2026 Speakers ({len(speakers)})")
    print("=" * 40)
    for letter, profiles in group_by_letter(speakers).items():
        print(f"\n{letter}")
        for profile in profiles:
            count = len(profile.sessions)
            print(f"  {profile.display_name}  [{profile.slug}]  {count} session{'s' if count != 1 else ''}")


def run_export(output: str):
    """Export favorite sessions to an iCal file."""
    from ccoi.data_loader import DataLoader
    from ccoi.export import export_ical
    from ccoi.favorites import FavoritesManager
    from ccoi.storage import JsonFileStore

    loader = DataLoader()
    favorites = FavoritesManager(JsonFileStore())
    selected = favorites.get_favorite_sessions(loader.get_all_days())
    if not selected:
        print("No favorite sessions to export.")
        return
    output_path = Path(output)
    count = export_ical(selected, output_path)
    print(f"Exported {count} sessions to {output_path}")


def run_app():
    """Launch the TUI application."""
    from ccoi.app import CompanionApp
    app = CompanionApp()
    app.run()


def main():
    if len(sys.argv) > 1 and sys.argv[1] == "speakers":
        run_speakers()
    elif len(sys.argv) > 1 and sys.argv[1] == "export":
        run_export(sys.argv[2] if len(sys.argv) > 2 else "ccoi2026.ics")
    else:
        run_app()


if __name__ == "__main__":
    main()
