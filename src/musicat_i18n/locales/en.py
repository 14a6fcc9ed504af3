"""Musicat English strings.

This is the base locale: its key set and nesting define the shape every
other locale must match.
"""

from typing import Any

TRANSLATIONS: dict[str, Any] = {
    "infoPopup": {
        "buildBy": "Built by ",
        "version": "Version",
        "releaseNotes": "Release notes",
    },
    # =========================================================================
    # Sidebar
    # =========================================================================
    "sidebar": {
        "search": "Search",
        "library": "Library",
        "albums": "Albums",
        "favorites": "Favorites",
        "playlists": "Playlists",
        "smartPlaylists": "Smart playlists",
        "artistsToolkit": "Artist's toolkit",
        "map": "Map",
        "internetArchive": "Internet Archive",
        "stats": "Stats",
    },
    # =========================================================================
    # Library
    # =========================================================================
    "library": {
        "fields": {
            "title": "Title",
            "artist": "Artist",
            "composer": "Composer",
            "album": "Album",
            "track": "Track",
            "year": "Year",
            "dateAdded": "Date added",
            "genre": "Genre",
            "origin": "Origin",
            "duration": "Duration",
            "tags": "Tags",
        },
    },
    "bottomBar": {
        "queue": "Queue",
        "lyrics": "Lyrics",
        "lossySelector": {
            "lossy": "Lossy",
            "lossless": "Lossless",
            "both": "Lossy + Lossless",
        },
        "nextUp": "Next up",
        "stats": {
            "songs": "songs",
            "artists": "artists",
            "albums": "albums",
        },
    },
    # =========================================================================
    # Smart playlists
    # =========================================================================
    "smartPlaylists": {
        "builtIn": {
            "recentlyAdded": "Recently added",
            "favourites": "Favourites",
        },
        "builder": {
            "close": "Close builder",
            "save": "Save",
            "placeholder": "My new smart playlist",
            "addNewBlock": "Add new block",
            "valid": "Query is valid",
            "invalid": "Query is invalid",
            "parts": {
                "byArtist": {
                    "title": "By artist",
                    "example": "eg. By Charlie Parker",
                },
                "releasedBetween": {
                    "title": "Released between",
                    "example": "eg. Released between 1950 and 1967",
                },
                "releasedAfter": {
                    "title": "Released after",
                    "example": "eg. Released after 1950",
                },
                "releasedIn": {
                    "title": "Released in",
                    "example": "eg. Released in 1999",
                },
                "titleContains": {
                    "title": "Title contains {text}",
                    "example": "eg. Title contains Love",
                },
                "longerThan": {
                    "title": "Longer than",
                    "example": "eg. Longer than 04:00",
                },
                "containsGenre": {
                    "title": "Contains genre",
                    "example": "eg. Contains genre Jazz",
                },
                "fromCountry": {
                    "title": "From country",
                    "example": "eg. From country United States",
                },
                "byComposer": {
                    "title": "By composer",
                    "example": "eg. By composer Cole Porter",
                },
                "containsTag": {
                    "title": "Contains tag",
                    "example": "eg. Contains tag Love",
                },
            },
        },
        "newSmartPlaylist": "New smart playlist",
        "libraryPlaceholder": {
            "title": "Smart playlist results will appear here",
            "subtitle": "Happy searching!",
        },
    },
    # =========================================================================
    # Track info
    # =========================================================================
    "trackInfo": {
        "title": "Track info",
        "subtitle": "Use Up and Down to switch tracks",
        "overwriteFile": "Overwrite file",
        "fileInfo": "File info",
        "file": "File",
        "codec": "Codec",
        "tagType": "Tag type",
        "duration": "Duration",
        "sampleRate": "Sample rate",
        "bitRate": "Bit rate",
        "enrichmentCenter": "Enrichment center",
        "countryOfOrigin": "Country of origin",
        "countryOfOriginTooltip": (
            "Set this to use the Map view, and filter by country in Smart Playlists"
        ),
        "fetchingOriginCountry": "Fetching...",
        "save": "Save",
        "fetchFromWikipedia": "Fetch from Wikipedia",
        "artworkReadyToSave": "Ready to save",
        "artworkFound": "Found",
        "noArtwork": "No artwork",
        "fetchArt": "Fetch art",
        "metadata": "Metadata",
        "tools": "Tools",
        "aboutArtwork": "About artwork",
        "artworkTooltipTitle": "🎨 Artwork priority",
        "artworkTooltipBody": (
            "<h3 style='margin:0'>🎨 Artwork priority</h3><br/>"
            "First, Musicat will look for artwork encoded in the file metadata, "
            "which you can overwrite by clicking this square (png and jpg supported). <br/><br/>"
            "If there is none, it will look for a file in the album folder named "
            "<i>cover.jpg, folder.jpg</i> or <i>artwork.jpg</i> "
            "(you can change this list of filenames in Settings).<br/><br/>"
            "Otherwise, it will look for any image in the album folder and use that."
        ),
        "encodedInFile": "Encoded in file",
        "bit": "bit",
        "noMetadata": "This song has no metadata",
        "unsupportedFormat": "This file type is not yet supported for metadata viewing/editing",
        "fix": "Fix",
        "errors": {
            "nullChars": "Some tags have hidden characters that prevent them from being read correctly.",
        },
        "artist": "Artist",
        "fixLegacyEncodings": {
            "title": "Fix legacy encodings",
            "body": (
                "If you have ID3 tags encoded with a legacy encoding, you should update them "
                "to universal UTF-8 so they display correctly. Pick an encoding and click Fix."
            ),
            "hint": "Choose an encoding...",
        },
    },
    # =========================================================================
    # Settings
    # =========================================================================
    "settings": {
        "title": "Settings",
        "library": "Library",
        "audio": "Audio",
        "outputDevice": "Output device",
        "followSystem": "Follow system",
        "interface": "Interface",
        "features": "Features",
        "subtitle": "Configure stuff",
        "version": "Version",
        "commaSeparatedFilenames": "Comma-separated filenames",
        "llms": "gpt-3.5-turbo, gpt-4, ollama",
        "foldersToWatch": "Folders to watch",
        "folder": "{{1 folder | ?? folders}}",
        "importing": "Importing..",
        "enableArtistsToolkit": "Enable Artist's toolkit",
        "enableAIFeatures": "Enable AI features",
        "aiModel": "AI model (LLM)",
        "openApiKey": "OpenAI API key",
        "geniusApiKey": "Genius API key",
    },
    "wiki": {
        "inArticle": "Mentions found in your library:",
        "clickHint": "Click to scroll to mention",
        "albums": "Albums",
        "songs": "Songs",
        "artists": "Artists",
    },
    "tagCloud": {
        "close": "Clear all tags",
    },
}
