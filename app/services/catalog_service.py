"""
Synthetic track catalog for artists without a real one.

The catalog is a pure function of the profile: every per-track value comes
from ``track_variation(seed, index)``, where the seed is derived from the
artist id. The same profile always yields the same tracks.
"""
import math

from app.schemas.artist import ArtistProfile, CatalogTrack

MAX_TRACKS = 10
DEFAULT_TRACK_COUNT = 6
DEFAULT_TOTAL_PLAYS = 100000
DEFAULT_GENRE = "Pop"
LATEST_RELEASE_YEAR = 2024
PLAYS_DECAY_PER_TRACK = 0.06

GENRE_TRACK_TITLES: dict[str, list[str]] = {
    "Pop": ["New Dawn", "Dance With Me", "Without You", "City Lights", "Dream On", "Forever", "Between Us", "Spring Will Come", "You and Me", "It'll Be Alright"],
    "R&B": ["Velvet Night", "Touch", "Silence", "Sweet Poison", "In the Dark", "Shards", "Feel You", "Whisper", "Pulse", "Wordless"],
    "Rock": ["Wall of Fire", "Mutiny", "Electric Storm", "Endless Road", "Roar", "Flame Within", "Last Stand", "Freedom", "Thunder", "Against the Wind"],
    "Alternative": ["Grey Ocean", "Between the Lines", "Rupture", "Inertia", "Carousel", "Thin Ice", "Parallels", "Antigravity", "Noise", "Breathe Out"],
    "Indie": ["Rainy Monday", "Small Joys", "Watercolor", "Cozy Evening", "Old Photos", "Clouds", "Bicycle", "Bookshelf", "Ray of Light", "Simplicity"],
    "Folk": ["Birch Grove", "Song of the Wind", "River of Time", "Old House", "Wildflowers", "Grandmother's Lullaby", "Cranes", "Footpath", "Campfire", "Daybreak"],
    "Electronic": ["Digital Dream", "Neon Pulse", "Synthesis", "Time Machine", "Signal", "Plasma", "Binary Love", "Glitch", "Algorithm", "Frequency"],
    "Synth-pop": ["Retro Future", "Neon Forever", "Dancefloor 2099", "Disco of Dreams", "Hologram", "VHS Memories", "Wave", "Sunset Drive", "Chrome Heart", "After Midnight"],
    "Hip-Hop": ["The Street Calls", "Concrete Jungle", "On Top", "My Block", "Flow", "Reality", "Gravity", "No Filters", "Black Gold", "The Way Up"],
    "Trap": ["Bass Knock", "Night Raid", "Snare Trap", "Dark Beat", "Smoke", "No Brakes", "Predator", "Labyrinth", "Magnet", "Ultrabass"],
    "Dream Pop": ["Cloud Castle", "Flying in a Dream", "Weightless", "Echo of Stars", "Misty Shore", "Moon Dust", "Zephyr", "Quiet Cosmos", "Glass Ocean", "Dawn in the Fog"],
    "Shoegaze": ["Wall of Sound", "Blurred Edges", "Depth", "Veil", "Paradise Lost", "White Noise", "Spiral", "Slow Whirlpool", "Static", "Infinity"],
    "Jazz": ["Midnight Blues", "Improvisation No. 5", "Velvet Evening", "Swing in the Park", "Rain in New York", "Saxophone and Moon", "Cool Breeze", "Sweet Rhythm", "Soul Note", "Jam Session"],
    "Neo-Soul": ["Warm Light", "Groove Inside", "The Soul Sings", "Sunday Blues", "Soft Beat", "Harmony", "Inspiration", "Honey Voice", "Sunset and Rhythm", "Truth"],
    "Techno": ["Bunker 303", "Industrial Dawn", "Club Pulse", "Dark Matter", "Strobe", "Mechanics", "Iron Rhythm", "Underground", "Hypnosis", "Overload"],
    "House": ["Roof of the World", "Dance Till Morning", "Deep Inside", "Sunrise", "Groove Nation", "Feel The Beat", "Horizon", "Tropical Vibe", "Club Fever", "Euphoria"],
    "Ambient": ["Northern Lights", "Forest Silence", "Ocean Breath", "Cosmic Void", "First Snow", "Morning Mist", "Sounds of the Tundra", "Endless Distance", "Ice Crystals", "Stillness"],
    "Post-Rock": ["Event Horizon", "Avalanche", "Tectonic Shift", "Waiting", "Light After Dark", "Epicenter", "Slow Explosion", "Calm Before the Storm", "Surf", "Wall of Dawn"],
    "Pop-Rock": ["Electric Heart", "Broken Map", "Live on Air", "Altitude", "Asphalt and Stars", "Above the Sky", "Radio Rain", "Drive", "Full Throttle", "Rock and Roll Forever"],
    "Punk": ["Anarchy Spring", "Riot Within", "Broken Glass", "Three Chords", "Basement", "Scream", "Standoff", "No Rules", "Raw Sound", "Us Against Them"],
    "Lo-Fi": ["Lazy Morning", "Cup of Coffee", "Rain on the Window", "Warm Tubes", "Vinyl Crackle", "Soft Focus", "Nostalgia", "Rooftop Sunset", "Slow Day", "Calm"],
    "Chillhop": ["Spring Breeze", "City Lights at Night", "Evening Walk", "Sunny Beat", "Amusement Park", "Mint Tea", "Cloudy Day", "Boombox", "Good Vibes", "Orange Sunset"],
    "Soul": ["Confession", "Deep Feeling", "Fire Inside", "Power of Love", "Inexpressible", "Golden Hour", "Native Land", "Voice of the Heart", "True Passion", "Gratitude"],
}

FALLBACK_TITLES = [f"Track #{n}" for n in range(1, 9)]


def artist_seed(artist_id: str) -> int:
    """Sum of the character codes of the artist id."""
    return sum(ord(char) for char in artist_id)


def track_variation(seed: int, index: int) -> int:
    """Per-track variation value in [0, 100), fixed by (seed, index)."""
    return (seed * (index + 1) * 7) % 100


def generate_tracks(profile: ArtistProfile) -> list[CatalogTrack]:
    """Build the synthetic catalog for a profile."""
    count = min(profile.total_tracks or DEFAULT_TRACK_COUNT, MAX_TRACKS)
    main_genre = profile.primary_genre or DEFAULT_GENRE
    secondary_genre = profile.genres[1] if len(profile.genres) > 1 else None
    main_titles = GENRE_TRACK_TITLES.get(main_genre, FALLBACK_TITLES)
    # An uncurated secondary genre is never surfaced
    secondary_titles = GENRE_TRACK_TITLES.get(secondary_genre, []) if secondary_genre else []
    base_plays = profile.total_plays or DEFAULT_TOTAL_PLAYS
    seed = artist_seed(profile.id)

    tracks = []
    for i in range(count):
        s = track_variation(seed, i)
        use_secondary = bool(secondary_titles) and i % 3 == 2
        titles = secondary_titles if use_secondary else main_titles
        plays = math.floor(base_plays / count * (1 - i * PLAYS_DECAY_PER_TRACK))

        tracks.append(CatalogTrack(
            id=f"{profile.id}-track-{i}",
            title=titles[i % len(titles)],
            artist=profile.full_name,
            artist_id=profile.id,
            duration=f"{2 + s % 3}:{10 + s % 50:02d}",
            plays=plays,
            likes=math.floor(plays * (0.03 + (s % 5) * 0.01)),
            genre=secondary_genre if use_secondary else main_genre,
            release_date=f"{LATEST_RELEASE_YEAR - i // 3}-{1 + s % 12:02d}-{1 + s % 28:02d}",
            is_explicit=s % 7 == 0,
        ))
    return tracks
