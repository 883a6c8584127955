"""
Mock catalog API responses for testing.

Contains realistic responses from the adult catalog (and its mirror), the
anime catalog (search, episodes, stream) and AniList GraphQL.
These fixtures are used with respx to mock httpx calls in tests.
"""

# Adult catalog search response
# GET /search/Overflow
HENTAI_SEARCH_RESPONSE = {
    "results": [
        {
            "name": "Overflow",
            "episodes": [
                {
                    "id": "overflow-1",
                    "name": "Overflow Episode 1",
                    "slug": "overflow-1",
                    "link": "https://hentai.example/watch/overflow-1",
                },
                {
                    "id": "overflow-2",
                    "name": "Overflow Episode 2",
                    "slug": "overflow-2",
                    "link": "https://hentai.example/watch/overflow-2",
                },
            ],
            "streams": [
                {"width": 1920, "height": 1080, "size_mbs": 120, "url": "https://cdn.example/o1.m3u8"},
            ],
        },
        {
            "name": "Overflow OVA",
            "episodes": [
                {"id": "overflow-ova-1", "name": "Overflow OVA 1", "link": ""},
            ],
            "streams": [],
        },
    ]
}

# Adult catalog search with no match
HENTAI_SEARCH_EMPTY_RESPONSE = {"results": []}

# Anime catalog series search
# GET /api/search?keyword=Frieren
ANIME_SEARCH_RESPONSE = {
    "success": True,
    "result": {
        "id": "frieren-beyond-journeys-end-18542",
        "data_id": 18542,
        "title": "Frieren: Beyond Journey's End",
        "link": "https://anime.example/frieren-beyond-journeys-end-18542",
    },
}

ANIME_SEARCH_NOT_FOUND_RESPONSE = {"success": False, "message": "No results"}

# Anime catalog episode list
# GET /api/episodes/frieren-beyond-journeys-end-18542
ANIME_EPISODES_RESPONSE = {
    "success": True,
    "results": [
        {
            "id": "frieren-beyond-journeys-end-18542?ep=107257",
            "title": "The Journey's End",
            "episode_no": 1,
            "japanese_title": "旅の終わり",
        },
        {
            "id": "frieren-beyond-journeys-end-18542?ep=107258",
            "title": "It Didn't Have to Be Magic...",
            "number": "2",
            "japanese_title": "",
        },
    ],
}

# Anime catalog stream info
# GET /api/stream?id=frieren-beyond-journeys-end-18542?ep=107257
ANIME_STREAM_RESPONSE = {
    "success": True,
    "results": {
        "streamingInfo": [
            {
                "status": "fulfilled",
                "value": {
                    "decryptionResult": {
                        "type": "sub",
                        "server": "hd-1",
                        "source": {
                            "sources": [
                                {"file": "https://cdn.example/sub/master.m3u8", "type": "hls"},
                            ],
                            "tracks": [
                                {"file": "https://cdn.example/sub/eng.vtt", "label": "English", "kind": "captions", "default": True},
                                {"file": "https://cdn.example/sub/fre.vtt", "label": "French", "kind": "captions"},
                                {"file": "https://cdn.example/sub/thumbs.vtt", "kind": "thumbnails"},
                            ],
                            "encrypted": False,
                            "intro": {"start": 0, "end": 0},
                            "outro": {"start": 1380, "end": 1470},
                        },
                    }
                },
            },
            {
                "status": "fulfilled",
                "value": {
                    "decryptionResult": {
                        "type": "dub",
                        "server": "hd-2",
                        "source": {
                            "sources": [
                                {"file": "https://cdn.example/dub/master.m3u8", "type": "hls"},
                            ],
                            "tracks": [],
                            "encrypted": True,
                        },
                    }
                },
            },
            {
                "status": "rejected",
                "reason": "Server hd-3 timed out",
            },
        ]
    },
}

ANIME_STREAM_FAILURE_RESPONSE = {"success": False, "message": "Episode not found"}

# AniList GraphQL Media response
# POST https://graphql.anilist.co
ANILIST_MEDIA_RESPONSE = {
    "data": {
        "Media": {
            "id": 154587,
            "title": {
                "romaji": "Sousou no Frieren",
                "english": "Frieren: Beyond Journey's End",
                "native": "葬送のフリーレン",
            },
            "coverImage": {"large": "https://img.anili.st/cover/154587.jpg"},
            "bannerImage": "https://img.anili.st/banner/154587.jpg",
            "description": "The adventure is over but life goes on for an elf mage.",
            "genres": ["Adventure", "Drama", "Fantasy"],
            "averageScore": 91,
            "popularity": 350000,
            "episodes": 28,
            "season": "FALL",
            "seasonYear": 2023,
            "status": "FINISHED",
            "studios": {"nodes": [{"name": "Madhouse"}]},
        }
    }
}

ANILIST_MEDIA_NOT_FOUND_RESPONSE = {
    "data": {"Media": None},
    "errors": [{"message": "Not Found.", "status": 404}],
}

ANILIST_SEARCH_RESPONSE = {
    "data": {
        "Page": {
            "media": [
                ANILIST_MEDIA_RESPONSE["data"]["Media"],
                {
                    "id": 170068,
                    "title": {"romaji": "Overflow", "english": None, "native": "オーバーフロー"},
                    "coverImage": {"large": None},
                    "bannerImage": None,
                    "description": None,
                    "genres": ["Hentai", "Romance"],
                    "averageScore": None,
                    "popularity": 1200,
                    "episodes": 8,
                    "season": "WINTER",
                    "seasonYear": 2020,
                    "status": "FINISHED",
                    "studios": {"nodes": []},
                },
            ]
        }
    }
}
