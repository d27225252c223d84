"""Hand-authored baseline artist profiles.

Used whenever no live data exists for an artist. Callers always receive
copies so that read-path repairs cannot alter the seed data.
"""
from typing import Any, Iterable

from app.schemas.artist import ArtistProfile, ArtistSocials


def _profile(**fields: Any) -> ArtistProfile:
    socials = ArtistSocials(**fields.pop("socials", {}))
    defaults: dict[str, Any] = {"country": "Russia", "languages": ["Russian"]}
    return ArtistProfile(**{**defaults, **fields, "socials": socials})


BASELINE_PROFILES: list[ArtistProfile] = [
    _profile(
        id="artist-1",
        email="ivanov@promo.fm",
        username="aleksandr_ivanov",
        full_name="Aleksandr Ivanov",
        avatar_url="https://images.unsplash.com/photo-1649968399156-47b95b9472d2?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Pop and R&B artist from Moscow. Music that makes you feel.",
        location="Moscow, Russia",
        city="Moscow",
        website="https://ivanov-music.ru",
        phone="+7 (495) 111-22-33",
        genres=["Pop", "R&B"],
        rating=4.8,
        total_plays=245000,
        total_followers=12500,
        total_concerts=34,
        total_tracks=34,
        coins_balance=1250,
        is_verified=True,
        socials={
            "instagram": "@aleksandr_ivanov", "twitter": "@aivanov_music",
            "facebook": "AleksandrIvanovMusic", "youtube": "@AleksandrIvanovOfficial",
            "spotify": "aleksandr-ivanov", "apple_music": "aleksandr-ivanov",
        },
        career_start="2018",
        label="Independent Artist",
        booking_email="booking@ivanov-music.ru",
        languages=["Russian", "English"],
        created_at="2024-03-15T10:00:00Z",
    ),
    _profile(
        id="artist-2",
        email="star@promo.fm",
        username="maria_star",
        full_name="Maria Zvezdnaya",
        avatar_url="https://images.unsplash.com/photo-1575454211631-f5aba648b97d?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Indie and folk songwriter from St. Petersburg. Songs about love, nature and inner worlds.",
        location="St. Petersburg, Russia",
        city="St. Petersburg",
        website="https://mariastar.ru",
        phone="+7 (812) 333-44-55",
        genres=["Indie", "Folk"],
        rating=4.9,
        total_plays=189000,
        total_followers=8700,
        total_concerts=21,
        total_tracks=21,
        coins_balance=980,
        is_verified=True,
        socials={
            "instagram": "@maria_star_music", "twitter": "@mstarmusic",
            "facebook": "MariaStarMusic", "youtube": "@MariaStarOfficial",
            "spotify": "maria-star", "apple_music": "maria-star",
        },
        career_start="2019",
        label="Star Records",
        manager="Ivan Petrov",
        booking_email="booking@mariastar.ru",
        languages=["Russian", "English", "French"],
        created_at="2024-05-20T14:00:00Z",
    ),
    _profile(
        id="artist-3",
        email="gromov@promo.fm",
        username="daniil_gromov",
        full_name="Daniil Gromov",
        avatar_url="https://images.unsplash.com/photo-1762160766901-b31387401420?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Rock and alternative from Kazan. Guitars, big vocals and songs about freedom.",
        location="Kazan, Russia",
        city="Kazan",
        website="https://gromovrock.ru",
        phone="+7 (843) 555-66-77",
        genres=["Rock", "Alternative"],
        rating=4.6,
        total_plays=156000,
        total_followers=6200,
        total_concerts=58,
        total_tracks=18,
        coins_balance=750,
        socials={
            "instagram": "@daniil_gromov", "twitter": "@gromov_rock",
            "facebook": "DaniilGromovRock", "youtube": "@GromovRock",
            "spotify": "daniil-gromov", "apple_music": "daniil-gromov",
        },
        career_start="2016",
        label="Grom Records",
        manager="Aleksei Kozlov",
        booking_email="booking@gromovrock.ru",
        created_at="2024-01-10T08:00:00Z",
    ),
    _profile(
        id="artist-4",
        email="nova@promo.fm",
        username="alisa_nova",
        full_name="Alisa Nova",
        avatar_url="https://images.unsplash.com/photo-1576190327176-9d5f672225c6?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Electronic and synth-pop from Moscow. Synthesizers, drum machines and a voice from the future.",
        location="Moscow, Russia",
        city="Moscow",
        website="https://alisanova.music",
        phone="+7 (495) 888-99-00",
        genres=["Electronic", "Synth-pop"],
        rating=5.0,
        total_plays=412000,
        total_followers=28900,
        total_concerts=45,
        total_tracks=45,
        coins_balance=3200,
        is_verified=True,
        socials={
            "instagram": "@alisa_nova_music", "twitter": "@alisanova",
            "facebook": "AlisaNovaMusic", "youtube": "@AlisaNovaOfficial",
            "spotify": "alisa-nova", "apple_music": "alisa-nova",
        },
        career_start="2020",
        label="Nova Sounds",
        manager="Ekaterina Smirnova",
        booking_email="booking@alisanova.music",
        languages=["Russian", "English", "German"],
        created_at="2024-07-01T12:00:00Z",
    ),
    _profile(
        id="artist-5",
        email="volkov@promo.fm",
        username="nikita_volkov",
        full_name="Nikita Volkov",
        avatar_url="https://images.unsplash.com/photo-1738999631988-4eb7205e91e6?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Hip-hop and trap from Yekaterinburg. Ural beats, honest lyrics.",
        location="Yekaterinburg, Russia",
        city="Yekaterinburg",
        website="https://volkov-music.ru",
        genres=["Hip-Hop", "Trap"],
        rating=4.7,
        total_plays=320000,
        total_followers=18500,
        total_concerts=62,
        total_tracks=41,
        coins_balance=2100,
        is_verified=True,
        socials={"instagram": "@nikita_volkov", "youtube": "@VolkovBeats"},
        career_start="2019",
        label="Wolf Pack Records",
        booking_email="booking@volkov-music.ru",
        created_at="2024-02-14T09:00:00Z",
    ),
    _profile(
        id="artist-6",
        email="luna@promo.fm",
        username="eva_luna",
        full_name="Eva Luna",
        avatar_url="https://images.unsplash.com/photo-1763539817785-cc351352b3f7?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Dream pop and shoegaze from Novosibirsk. Ethereal melodies and cosmic textures.",
        location="Novosibirsk, Russia",
        city="Novosibirsk",
        genres=["Dream Pop", "Shoegaze"],
        rating=4.5,
        total_plays=134000,
        total_followers=5400,
        total_concerts=16,
        total_tracks=14,
        coins_balance=620,
        is_verified=True,
        socials={"instagram": "@eva_luna_music", "spotify": "eva-luna"},
        career_start="2021",
        label="Lunar Sounds",
        created_at="2024-04-05T11:00:00Z",
    ),
    _profile(
        id="artist-7",
        email="tsar@promo.fm",
        username="maxim_tsar",
        full_name="Maxim Tsarev",
        avatar_url="https://images.unsplash.com/photo-1752176293271-d39e5dbc6f1c?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Jazz and neo-soul from Rostov-on-Don. Live instruments, improvisation, soul.",
        location="Rostov-on-Don, Russia",
        city="Rostov-on-Don",
        genres=["Jazz", "Neo-Soul"],
        rating=4.9,
        total_plays=98000,
        total_followers=4100,
        total_concerts=88,
        total_tracks=27,
        coins_balance=540,
        socials={"instagram": "@maxim_tsar", "youtube": "@TsarevJazz"},
        career_start="2015",
        label="Tsar Music",
        booking_email="booking@tsar-jazz.ru",
        created_at="2024-06-10T15:00:00Z",
    ),
    _profile(
        id="artist-8",
        email="kira@promo.fm",
        username="kira_flame",
        full_name="Kira Plameneva",
        avatar_url="https://images.unsplash.com/photo-1761431246385-abb584084ce1?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Techno and house from Moscow. Club electronics for a new generation.",
        location="Moscow, Russia",
        city="Moscow",
        genres=["Techno", "House"],
        rating=4.4,
        total_plays=275000,
        total_followers=15200,
        total_concerts=94,
        total_tracks=38,
        coins_balance=1890,
        is_verified=True,
        socials={"instagram": "@kira_flame", "youtube": "@KiraFlame"},
        career_start="2017",
        label="Flame Records",
        booking_email="booking@kiraflame.ru",
        created_at="2024-01-25T18:00:00Z",
    ),
    _profile(
        id="artist-9",
        email="nord@promo.fm",
        username="artem_nord",
        full_name="Artem Severny",
        avatar_url="https://images.unsplash.com/photo-1546595524-63e5598501fc?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Ambient and post-rock from Murmansk. Sounds of the north, endless open space.",
        location="Murmansk, Russia",
        city="Murmansk",
        genres=["Ambient", "Post-Rock"],
        rating=4.3,
        total_plays=67000,
        total_followers=3200,
        total_concerts=12,
        total_tracks=22,
        coins_balance=380,
        socials={"instagram": "@artem_nord", "spotify": "artem-nord"},
        career_start="2020",
        created_at="2024-08-01T10:00:00Z",
    ),
    _profile(
        id="artist-10",
        email="diana@promo.fm",
        username="diana_storm",
        full_name="Diana Shtorm",
        avatar_url="https://images.unsplash.com/photo-1746136901368-76a1921bb392?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Pop-rock and punk from Krasnodar. Energy, drive and a rebel spirit.",
        location="Krasnodar, Russia",
        city="Krasnodar",
        genres=["Pop-Rock", "Punk"],
        rating=4.6,
        total_plays=198000,
        total_followers=9800,
        total_concerts=73,
        total_tracks=29,
        coins_balance=1100,
        is_verified=True,
        socials={"instagram": "@diana_storm", "youtube": "@DianaStorm"},
        career_start="2018",
        label="Storm Records",
        booking_email="booking@dianastorm.ru",
        created_at="2024-03-20T14:00:00Z",
    ),
    _profile(
        id="artist-11",
        email="pixel@promo.fm",
        username="igor_pixel",
        full_name="Igor Pixel",
        avatar_url="https://images.unsplash.com/photo-1722945220326-d1a1d0115f44?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="Lo-fi and chillhop from Nizhny Novgorod. Beatmaker, producer, dreamer.",
        location="Nizhny Novgorod, Russia",
        city="N. Novgorod",
        genres=["Lo-Fi", "Chillhop"],
        rating=4.2,
        total_plays=142000,
        total_followers=7300,
        total_concerts=8,
        total_tracks=56,
        coins_balance=870,
        socials={"instagram": "@igor_pixel", "spotify": "igor-pixel"},
        career_start="2021",
        created_at="2024-05-15T16:00:00Z",
    ),
    _profile(
        id="artist-12",
        email="velvet@promo.fm",
        username="sofia_velvet",
        full_name="Sofia Velvet",
        avatar_url="https://images.unsplash.com/photo-1712863132626-60bb701a6f4a?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&w=400",
        bio="R&B and soul from Samara. A velvet voice and deep lyrics about love and life.",
        location="Samara, Russia",
        city="Samara",
        genres=["R&B", "Soul"],
        rating=4.8,
        total_plays=215000,
        total_followers=11400,
        total_concerts=31,
        total_tracks=25,
        coins_balance=1450,
        is_verified=True,
        socials={"instagram": "@sofia_velvet", "youtube": "@SofiaVelvet"},
        career_start="2019",
        label="Velvet Records",
        booking_email="booking@sofiavelvet.ru",
        created_at="2024-04-28T13:00:00Z",
    ),
]


class BaselineProfiles:
    """Read-only lookup over a set of baseline profiles."""

    def __init__(self, profiles: Iterable[ArtistProfile]):
        self._profiles = {profile.id: profile for profile in profiles}

    def get(self, artist_id: str) -> ArtistProfile | None:
        profile = self._profiles.get(artist_id)
        return profile.model_copy(deep=True) if profile else None

    def avatar_for(self, artist_id: str) -> str:
        profile = self._profiles.get(artist_id)
        return profile.avatar_url if profile else ""

    def all(self) -> list[ArtistProfile]:
        """Every baseline profile, in seed order."""
        return [profile.model_copy(deep=True) for profile in self._profiles.values()]

    def __contains__(self, artist_id: str) -> bool:
        return artist_id in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


def default_baseline() -> BaselineProfiles:
    return BaselineProfiles(BASELINE_PROFILES)
