"""
Fixed values shared across the client: wire vocabulary and OCR enumerations.
"""

from enum import Enum

FALLBACK_API_URL = "https://anyparserapi.com"
PARSE_PATH = "/parse/v1"

FORMATS = ("json", "markdown", "html")
MODELS = ("text", "ocr", "vlm", "lam", "crawler")
ENCODINGS = ("utf-8", "latin1")
STRATEGIES = ("LIFO", "FIFO")
TRAVERSAL_SCOPES = ("subtree", "domain")


class OcrLanguage(str, Enum):
    """Tesseract language codes accepted by the OCR model."""

    AFRIKAANS = "afr"
    AMHARIC = "amh"
    ARABIC = "ara"
    ASSAMESE = "asm"
    AZERBAIJANI = "aze"
    AZERBAIJANI_CYRILLIC = "aze_cyrl"
    BELARUSIAN = "bel"
    BENGALI = "ben"
    TIBETAN = "bod"
    BOSNIAN = "bos"
    BRETON = "bre"
    BULGARIAN = "bul"
    CATALAN = "cat"
    CEBUANO = "ceb"
    CZECH = "ces"
    SIMPLIFIED_CHINESE = "chi_sim"
    SIMPLIFIED_CHINESE_VERTICAL = "chi_sim_vert"
    TRADITIONAL_CHINESE = "chi_tra"
    TRADITIONAL_CHINESE_VERTICAL = "chi_tra_vert"
    CHEROKEE = "chr"
    CORSICAN = "cos"
    WELSH = "cym"
    DANISH = "dan"
    GERMAN = "deu"
    DIVEHI = "div"
    DZONGKHA = "dzo"
    GREEK = "ell"
    ENGLISH = "eng"
    MIDDLE_ENGLISH = "enm"
    ESPERANTO = "epo"
    ESTONIAN = "est"
    BASQUE = "eus"
    FAROESE = "fao"
    PERSIAN = "fas"
    FILIPINO = "fil"
    FINNISH = "fin"
    FRENCH = "fra"
    MIDDLE_FRENCH = "frm"
    FRISIAN = "fry"
    SCOTTISH_GAELIC = "gla"
    IRISH = "gle"
    GALICIAN = "glg"
    GUJARATI = "guj"
    HAITIAN = "hat"
    HEBREW = "heb"
    HINDI = "hin"
    CROATIAN = "hrv"
    HUNGARIAN = "hun"
    ARMENIAN = "hye"
    IGBO = "ibo"
    INDONESIAN = "ind"
    ICELANDIC = "isl"
    ITALIAN = "ita"
    OLD_ITALIAN = "ita_old"
    JAVANESE = "jav"
    JAPANESE = "jpn"
    JAPANESE_VERTICAL = "jpn_vert"
    KANNADA = "kan"
    GEORGIAN = "kat"
    OLD_GEORGIAN = "kat_old"
    KAZAKH = "kaz"
    KHMER = "khm"
    KIRGHIZ = "kir"
    KURDISH = "kmr"
    KOREAN = "kor"
    KOREAN_VERTICAL = "kor_vert"
    LAO = "lao"
    LATIN = "lat"
    LATVIAN = "lav"
    LITHUANIAN = "lit"
    LUXEMBOURGISH = "ltz"
    MALAYALAM = "mal"
    MARATHI = "mar"
    MACEDONIAN = "mkd"
    MALTESE = "mlt"
    MONGOLIAN = "mon"
    MAORI = "mri"
    MALAY = "msa"
    BURMESE = "mya"
    NEPALI = "nep"
    DUTCH = "nld"
    NORWEGIAN = "nor"
    OCCITAN = "oci"
    ORIYA = "ori"
    PANJABI = "pan"
    POLISH = "pol"
    PORTUGUESE = "por"
    PUSHTO = "pus"
    QUECHUA = "que"
    ROMANIAN = "ron"
    RUSSIAN = "rus"
    SANSKRIT = "san"
    SINHALA = "sin"
    SLOVAK = "slk"
    SLOVENIAN = "slv"
    SINDHI = "snd"
    SPANISH = "spa"
    OLD_SPANISH = "spa_old"
    ALBANIAN = "sqi"
    SERBIAN = "srp"
    SERBIAN_LATIN = "srp_latn"
    SUNDANESE = "sun"
    SWAHILI = "swa"
    SWEDISH = "swe"
    SYRIAC = "syr"
    TAMIL = "tam"
    TATAR = "tat"
    TELUGU = "tel"
    TAJIK = "tgk"
    THAI = "tha"
    TIGRINYA = "tir"
    TONGA = "ton"
    TURKISH = "tur"
    UIGHUR = "uig"
    UKRAINIAN = "ukr"
    URDU = "urd"
    UZBEK = "uzb"
    UZBEK_CYRILLIC = "uzb_cyrl"
    VIETNAMESE = "vie"
    YIDDISH = "yid"
    YORUBA = "yor"


class OcrPreset(str, Enum):
    """Tuned OCR profiles for common document kinds."""

    DOCUMENT = "document"
    HANDWRITING = "handwriting"
    SCAN = "scan"
    RECEIPT = "receipt"
    MAGAZINE = "magazine"
    INVOICE = "invoice"
    BUSINESS_CARD = "business-card"
    FAX = "fax"
    MENU = "menu"
    TEXTBOOK = "textbook"
    LOTTERY = "lottery"
    BLUEPRINT = "blueprint"
    NEWSPAPER = "newspaper"


OCR_LANGUAGES = frozenset(language.value for language in OcrLanguage)
OCR_PRESETS = frozenset(preset.value for preset in OcrPreset)
