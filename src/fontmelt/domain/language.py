"""Language ids of the Macintosh platform.

From https://developer.apple.com/fonts/TrueType-Reference-Manual/RM06/Chap6name.html

Valid ids are 0..94 and 128..150; anything else resolves to None.
"""

from enum import IntEnum


class MacintoshLanguage(IntEnum):
    """Language id for the Macintosh platform."""

    ENGLISH = 0
    FRENCH = 1
    GERMAN = 2
    ITALIAN = 3
    DUTCH = 4
    SWEDISH = 5
    SPANISH = 6
    DANISH = 7
    PORTUGUESE = 8
    NORWEGIAN = 9
    HEBREW = 10
    JAPANESE = 11
    ARABIC = 12
    FINNISH = 13
    GREEK = 14
    ICELANDIC = 15
    MALTESE = 16
    TURKISH = 17
    CROATIAN = 18
    CHINESE_TRADITIONAL = 19
    URDU = 20
    HINDI = 21
    THAI = 22
    KOREAN = 23
    LITHUANIAN = 24
    POLISH = 25
    HUNGARIAN = 26
    ESTONIAN = 27
    LATVIAN = 28
    SAMI = 29
    FAROESE = 30
    FARSI_PERSIAN = 31
    RUSSIAN = 32
    CHINESE_SIMPLIFIED = 33
    FLEMISH = 34
    IRISH_GAELIC = 35
    ALBANIAN = 36
    ROMANIAN = 37
    CZECH = 38
    SLOVAK = 39
    SLOVENIAN = 40
    YIDDISH = 41
    SERBIAN = 42
    MACEDONIAN = 43
    BULGARIAN = 44
    UKRAINIAN = 45
    BYELORUSSIAN = 46
    UZBEK = 47
    KAZAKH = 48
    AZERBAIJANI_CYRILLIC = 49
    AZERBAIJANI_ARABIC = 50
    ARMENIAN = 51
    GEORGIAN = 52
    MOLDAVIAN = 53
    KIRGHIZ = 54
    TAJIKI = 55
    TURKMEN = 56
    MONGOLIAN_MONGOLIAN_SCRIPT = 57
    MONGOLIAN_CYRILLIC = 58
    PASHTO = 59
    KURDISH = 60
    KASHMIRI = 61
    SINDHI = 62
    TIBETAN = 63
    NEPALI = 64
    SANSKRIT = 65
    MARATHI = 66
    BENGALI = 67
    ASSAMESE = 68
    GUJARATI = 69
    PUNJABI = 70
    ORIYA = 71
    MALAYALAM = 72
    KANNADA = 73
    TAMIL = 74
    TELUGU = 75
    SINHALESE = 76
    BURMESE = 77
    KHMER = 78
    LAO = 79
    VIETNAMESE = 80
    INDONESIAN = 81
    TAGALOG = 82
    MALAY_ROMAN_SCRIPT = 83
    MALAY_ARABIC_SCRIPT = 84
    AMHARIC = 85
    TIGRINYA = 86
    GALLA = 87
    SOMALI = 88
    SWAHILI = 89
    KINYARWANDA_RUANDA = 90
    RUNDI = 91
    NYANJA_CHEWA = 92
    MALAGASY = 93
    ESPERANTO = 94
    # 95..127 are unassigned
    WELSH = 128
    BASQUE = 129
    CATALAN = 130
    LATIN = 131
    QUECHUA = 132
    GUARANI = 133
    AYMARA = 134
    TATAR = 135
    UIGHUR = 136
    DZONGKHA = 137
    JAVANESE_ROMAN_SCRIPT = 138
    SUNDANESE_ROMAN_SCRIPT = 139
    GALICIAN = 140
    AFRIKAANS = 141
    BRETON = 142
    INUKTITUT = 143
    SCOTTISH_GAELIC = 144
    MANX_GAELIC = 145
    IRISH_GAELIC_DOT_ABOVE = 146
    TONGAN = 147
    GREEK_POLYTONIC = 148
    GREENLANDIC = 149
    AZERBAIJANI_ROMAN = 150

    @property
    def display_name(self) -> str:
        """Canonical name from the Apple reference manual."""
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    MacintoshLanguage.ENGLISH: "English",
    MacintoshLanguage.FRENCH: "French",
    MacintoshLanguage.GERMAN: "German",
    MacintoshLanguage.ITALIAN: "Italian",
    MacintoshLanguage.DUTCH: "Dutch",
    MacintoshLanguage.SWEDISH: "Swedish",
    MacintoshLanguage.SPANISH: "Spanish",
    MacintoshLanguage.DANISH: "Danish",
    MacintoshLanguage.PORTUGUESE: "Portuguese",
    MacintoshLanguage.NORWEGIAN: "Norwegian",
    MacintoshLanguage.HEBREW: "Hebrew",
    MacintoshLanguage.JAPANESE: "Japanese",
    MacintoshLanguage.ARABIC: "Arabic",
    MacintoshLanguage.FINNISH: "Finnish",
    MacintoshLanguage.GREEK: "Greek",
    MacintoshLanguage.ICELANDIC: "Icelandic",
    MacintoshLanguage.MALTESE: "Maltese",
    MacintoshLanguage.TURKISH: "Turkish",
    MacintoshLanguage.CROATIAN: "Croatian",
    MacintoshLanguage.CHINESE_TRADITIONAL: "Chinese (traditional)",
    MacintoshLanguage.URDU: "Urdu",
    MacintoshLanguage.HINDI: "Hindi",
    MacintoshLanguage.THAI: "Thai",
    MacintoshLanguage.KOREAN: "Korean",
    MacintoshLanguage.LITHUANIAN: "Lithuanian",
    MacintoshLanguage.POLISH: "Polish",
    MacintoshLanguage.HUNGARIAN: "Hungarian",
    MacintoshLanguage.ESTONIAN: "Estonian",
    MacintoshLanguage.LATVIAN: "Latvian",
    MacintoshLanguage.SAMI: "Sami",
    MacintoshLanguage.FAROESE: "Faroese",
    MacintoshLanguage.FARSI_PERSIAN: "Farsi/Persian",
    MacintoshLanguage.RUSSIAN: "Russian",
    MacintoshLanguage.CHINESE_SIMPLIFIED: "Chinese (simplified)",
    MacintoshLanguage.FLEMISH: "Flemish",
    MacintoshLanguage.IRISH_GAELIC: "Irish Gaelic",
    MacintoshLanguage.ALBANIAN: "Albanian",
    MacintoshLanguage.ROMANIAN: "Romanian",
    MacintoshLanguage.CZECH: "Czech",
    MacintoshLanguage.SLOVAK: "Slovak",
    MacintoshLanguage.SLOVENIAN: "Slovenian",
    MacintoshLanguage.YIDDISH: "Yiddish",
    MacintoshLanguage.SERBIAN: "Serbian",
    MacintoshLanguage.MACEDONIAN: "Macedonian",
    MacintoshLanguage.BULGARIAN: "Bulgarian",
    MacintoshLanguage.UKRAINIAN: "Ukrainian",
    MacintoshLanguage.BYELORUSSIAN: "Byelorussian",
    MacintoshLanguage.UZBEK: "Uzbek",
    MacintoshLanguage.KAZAKH: "Kazakh",
    MacintoshLanguage.AZERBAIJANI_CYRILLIC: "Azerbaijani (Cyrillic script)",
    MacintoshLanguage.AZERBAIJANI_ARABIC: "Azerbaijani (Arabic script)",
    MacintoshLanguage.ARMENIAN: "Armenian",
    MacintoshLanguage.GEORGIAN: "Georgian",
    MacintoshLanguage.MOLDAVIAN: "Moldavian",
    MacintoshLanguage.KIRGHIZ: "Kirghiz",
    MacintoshLanguage.TAJIKI: "Tajiki",
    MacintoshLanguage.TURKMEN: "Turkmen",
    MacintoshLanguage.MONGOLIAN_MONGOLIAN_SCRIPT: "Mongolian (Mongolian script)",
    MacintoshLanguage.MONGOLIAN_CYRILLIC: "Mongolian (Cyrillic script)",
    MacintoshLanguage.PASHTO: "Pashto",
    MacintoshLanguage.KURDISH: "Kurdish",
    MacintoshLanguage.KASHMIRI: "Kashmiri",
    MacintoshLanguage.SINDHI: "Sindhi",
    MacintoshLanguage.TIBETAN: "Tibetan",
    MacintoshLanguage.NEPALI: "Nepali",
    MacintoshLanguage.SANSKRIT: "Sanskrit",
    MacintoshLanguage.MARATHI: "Marathi",
    MacintoshLanguage.BENGALI: "Bengali",
    MacintoshLanguage.ASSAMESE: "Assamese",
    MacintoshLanguage.GUJARATI: "Gujarati",
    MacintoshLanguage.PUNJABI: "Punjabi",
    MacintoshLanguage.ORIYA: "Oriya",
    MacintoshLanguage.MALAYALAM: "Malayalam",
    MacintoshLanguage.KANNADA: "Kannada",
    MacintoshLanguage.TAMIL: "Tamil",
    MacintoshLanguage.TELUGU: "Telugu",
    MacintoshLanguage.SINHALESE: "Sinhalese",
    MacintoshLanguage.BURMESE: "Burmese",
    MacintoshLanguage.KHMER: "Khmer",
    MacintoshLanguage.LAO: "Lao",
    MacintoshLanguage.VIETNAMESE: "Vietnamese",
    MacintoshLanguage.INDONESIAN: "Indonesian",
    MacintoshLanguage.TAGALOG: "Tagalog",
    MacintoshLanguage.MALAY_ROMAN_SCRIPT: "Malay (Roman script)",
    MacintoshLanguage.MALAY_ARABIC_SCRIPT: "Malay (Arabic script)",
    MacintoshLanguage.AMHARIC: "Amharic",
    MacintoshLanguage.TIGRINYA: "Tigrinya",
    MacintoshLanguage.GALLA: "Galla",
    MacintoshLanguage.SOMALI: "Somali",
    MacintoshLanguage.SWAHILI: "Swahili",
    MacintoshLanguage.KINYARWANDA_RUANDA: "Kinyarwanda/Ruanda",
    MacintoshLanguage.RUNDI: "Rundi",
    MacintoshLanguage.NYANJA_CHEWA: "Nyanja/Chewa",
    MacintoshLanguage.MALAGASY: "Malagasy",
    MacintoshLanguage.ESPERANTO: "Esperanto",
    MacintoshLanguage.WELSH: "Welsh",
    MacintoshLanguage.BASQUE: "Basque",
    MacintoshLanguage.CATALAN: "Catalan",
    MacintoshLanguage.LATIN: "Latin",
    MacintoshLanguage.QUECHUA: "Quechua",
    MacintoshLanguage.GUARANI: "Guarani",
    MacintoshLanguage.AYMARA: "Aymara",
    MacintoshLanguage.TATAR: "Tatar",
    MacintoshLanguage.UIGHUR: "Uighur",
    MacintoshLanguage.DZONGKHA: "Dzongkha",
    MacintoshLanguage.JAVANESE_ROMAN_SCRIPT: "Javanese (Roman script)",
    MacintoshLanguage.SUNDANESE_ROMAN_SCRIPT: "Sundanese (Roman script)",
    MacintoshLanguage.GALICIAN: "Galician",
    MacintoshLanguage.AFRIKAANS: "Afrikaans",
    MacintoshLanguage.BRETON: "Breton",
    MacintoshLanguage.INUKTITUT: "Inuktitut",
    MacintoshLanguage.SCOTTISH_GAELIC: "Scottish Gaelic",
    MacintoshLanguage.MANX_GAELIC: "Manx Gaelic",
    MacintoshLanguage.IRISH_GAELIC_DOT_ABOVE: "Irish Gaelic (with dot above)",
    MacintoshLanguage.TONGAN: "Tongan",
    MacintoshLanguage.GREEK_POLYTONIC: "Greek (polytonic)",
    MacintoshLanguage.GREENLANDIC: "Greenlandic",
    MacintoshLanguage.AZERBAIJANI_ROMAN: "Azerbaijani (Roman script)",
}

_VALID_RANGES = (range(0, 95), range(128, 151))
_BY_ID = {member.value: member for member in MacintoshLanguage}


def macintosh_language(language_id: int) -> MacintoshLanguage | None:
    """Look up a Macintosh language id.

    Args:
        language_id: Raw language id from a name record

    Returns:
        The language, or None when the id lies outside [0, 95) and [128, 151)
    """
    if not any(language_id in valid for valid in _VALID_RANGES):
        return None
    return _BY_ID[language_id]
