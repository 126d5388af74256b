"""Built-in rule table.

Rules are listed per category in precedence order: more specific patterns
come before the general ones they would otherwise lose to. Each entry is a
``[patterns, field_specs]`` pair in the same encoding used by JSON rule
files (see uaclassify.classification.fields).
"""

from typing import Any

# Field names
NAME = "name"
VERSION = "version"
MODEL = "model"
VENDOR = "vendor"
TYPE = "type"
ARCHITECTURE = "architecture"

# Device types
MOBILE = "mobile"
TABLET = "tablet"
SMARTTV = "smarttv"
CONSOLE = "console"
WEARABLE = "wearable"
EMBEDDED = "embedded"

# Transform and mapping references
LOWERIZE = "lowerize"
MAPPING = "mapping"


BROWSER_RULES: list[Any] = [
    # Chrome for iOS / Android data saver
    [[r"\b(?:crmo|crios)\/([\w\.]+)"], [VERSION, [NAME, "Chrome"]]],
    # Microsoft Edge
    [[r"edg(?:e|ios|a)?\/([\w\.]+)"], [VERSION, [NAME, "Edge"]]],
    # Presto based Opera
    [
        [
            r"(opera\smini)\/([-\w\.]+)",
            r"(opera\s[mobiletab]{3,6})\b.+version\/([-\w\.]+)",
            r"(opera)(?:.+version\/|[\/\s]+)([\w\.]+)",
        ],
        [NAME, VERSION],
    ],
    [[r"opios[\/\s]+([\w\.]+)"], [VERSION, [NAME, "Opera Mini"]]],
    # Chromium based Opera
    [[r"\bopr\/([\w\.]+)"], [VERSION, [NAME, "Opera"]]],
    [
        [
            r"(kindle)\/([\w\.]+)",
            r"(lunascape|maxthon|netfront|jasmine|blazer)[\/\s]?([\w\.]*)",
            r"(avant\s|iemobile|slim)(?:browser)?[\/\s]?([\w\.]*)",
            r"(ba?idubrowser)[\/\s]?([\w\.]+)",
            r"(?:ms|\()(ie)\s([\w\.]+)",
            r"(flock|rockmelt|midori|epiphany|silk|skyfire|ovibrowser|bolt|iron|vivaldi|iridium"
            r"|phantomjs|bowser|quark|qupzilla|falkon|rekonq|puffin|brave|whale|qqbrowserlite|qq)"
            r"\/([-\w\.]+)",
            r"(weibo)__([\d\.]+)",
        ],
        [NAME, VERSION],
    ],
    [[r"(?:\buc\s?browser|(?:juc.+)ucweb)[\/\s]?([\w\.]+)"], [VERSION, [NAME, "UCBrowser"]]],
    [[r"\bqbcore\/([\w\.]+)"], [VERSION, [NAME, "WeChat(Win) Desktop"]]],
    [[r"micromessenger\/([\w\.]+)"], [VERSION, [NAME, "WeChat"]]],
    [[r"konqueror\/([\w\.]+)"], [VERSION, [NAME, "Konqueror"]]],
    # Internet Explorer 11
    [[r"trident.+rv[:\s]([\w\.]{1,9})\b.+like\sgecko"], [VERSION, [NAME, "IE"]]],
    [[r"yabrowser\/([\w\.]+)"], [VERSION, [NAME, "Yandex"]]],
    [[r"(avast|avg)\/([\w\.]+)"], [[NAME, r"(.+)", r"\1 Secure Browser"], VERSION]],
    [[r"\bfocus\/([\w\.]+)"], [VERSION, [NAME, "Firefox Focus"]]],
    [[r"\bopt\/([\w\.]+)"], [VERSION, [NAME, "Opera Touch"]]],
    [[r"coc_coc_browser\/([\w\.]+)"], [VERSION, [NAME, "Coc Coc"]]],
    [[r"dolfin\/([\w\.]+)"], [VERSION, [NAME, "Dolphin"]]],
    [[r"coast\/([\w\.]+)"], [VERSION, [NAME, "Opera Coast"]]],
    [[r"xiaomi\/miuibrowser\/([\w\.]+)"], [VERSION, [NAME, "MIUI Browser"]]],
    [[r"fxios\/([-\w\.]+)"], [VERSION, [NAME, "Firefox"]]],
    [[r"(samsungbrowser)\/([\w\.]+)"], [NAME, VERSION]],
    [[r"(comodo_dragon)\/([\w\.]+)"], [[NAME, r"_", " "], VERSION]],
    [
        [
            r"(electron)\/([\w\.]+)\ssafari",
            r"(tesla)(?:\sqtcarbrowser|\/(20\d\d\.[-\w\.]+))",
            r"m?(qqbrowser|baiduboxapp|2345explorer)[\/\s]?([\w\.]+)",
        ],
        [NAME, VERSION],
    ],
    [[r"(metasr)[\/\s]?([\w\.]+)", r"(lbbrowser)"], [NAME]],
    [[r";fbav\/([\w\.]+);"], [VERSION, [NAME, "Facebook"]]],
    [[r"headlesschrome(?:\/([\w\.]+)|\s)"], [VERSION, [NAME, "Chrome Headless"]]],
    # Android WebView; the name literal still consumes the "chrome" capture
    [[r"\swv\).+(chrome)\/([\w\.]+)"], [[NAME, "Chrome WebView"], VERSION]],
    [[r"droid.+\sversion\/([\w\.]+)\b.+(?:mobile\ssafari|safari)"], [VERSION, [NAME, "Android Browser"]]],
    [[r"(chrome|omniweb|arora|[tizenoka]{5}\s?browser)\/v?([\w\.]+)"], [NAME, VERSION]],
    [[r"version\/([\w\.]+)\s.*mobile\/\w+\s(safari)"], [VERSION, [NAME, "Mobile Safari"]]],
    [[r"version\/([\w\.]+)\s.*(mobile\s?safari|safari)"], [VERSION, NAME]],
    # Safari < 3.0 only reports its build number
    [[r"webkit.+?(mobile\s?safari|safari)(\/[\w\.]+)"], [NAME, [VERSION, MAPPING, "safari"]]],
    [[r"(webkit|khtml)\/([\w\.]+)"], [NAME, VERSION]],
    [[r"(navigator|netscape)\/([\w\.]+)"], [[NAME, "Netscape"], VERSION]],
    [[r"ile\svr;\srv:([\w\.]+)\).+firefox"], [VERSION, [NAME, "Firefox Reality"]]],
    [
        [
            r"ekiohf.+(flow)\/([\w\.]+)",
            r"(swiftfox)",
            r"(icedragon|iceweasel|camino|chimera|fennec|maemo\sbrowser|minimo|conkeror)[\/\s]?([\w\.\+]+)",
            r"(firefox|seamonkey|k-meleon|icecat|iceape|firebird|phoenix|palemoon|basilisk|waterfox)"
            r"\/([-\w\.]+)$",
            r"(firefox)\/([\w\.]+)\s[\w\s\-]+\/[\w\.]+$",
            r"(mozilla)\/([\w\.]+)\s.+rv\:.+gecko\/\d+",
            r"(polaris|lynx|dillo|icab|doris|amaya|w3m|netsurf|sleipnir)[\/\s]?([\w\.]+)",
            r"(links)\s\(([\w\.]+)",
            r"(gobrowser)\/?([\w\.]*)",
            r"(ice\s?browser)\/v?([\w\._]+)",
            r"(mosaic)[\/\s]([\w\.]+)",
        ],
        [NAME, VERSION],
    ],
]

ENGINE_RULES: list[Any] = [
    [[r"windows.+\sedge\/([\w\.]+)"], [VERSION, [NAME, "EdgeHTML"]]],
    [[r"webkit\/537\.36.+chrome\/(?!27)([\w\.]+)"], [VERSION, [NAME, "Blink"]]],
    [
        [
            r"(presto)\/([\w\.]+)",
            r"(webkit|trident|netfront|netsurf|amaya|lynx|w3m|goanna)\/([\w\.]+)",
            r"ekioh(flow)\/([\w\.]+)",
            r"(khtml|tasman|links)[\/\s]\(?([\w\.]+)",
            r"(icab)[\/\s]([23]\.[\d\.]+)",
        ],
        [NAME, VERSION],
    ],
    [[r"rv\:([\w\.]{1,9})\b.+(gecko)"], [VERSION, NAME]],
]

OS_RULES: list[Any] = [
    [[r"microsoft\s(windows)\s(vista|xp)"], [NAME, VERSION]],
    [
        [
            r"(windows)\snt\s6\.2;\s(arm)",
            r"(windows\sphone(?:\sos)*)[\s\/]?([\d\.\s\w]*)",
            r"(windows\smobile|windows)[\s\/]?([ntce\d\.\s]+\w)(?!.+xbox)",
        ],
        [NAME, [VERSION, MAPPING, "windows"]],
    ],
    [[r"(win(?=3|9|n)|win\s9x\s)([nt\d\.]+)"], [[NAME, "Windows"], [VERSION, MAPPING, "windows"]]],
    # iOS
    [
        [r"ip[honead]{2,4}\b(?:.*os\s([\w]+)\slike\smac|;\sopera)", r"cfnetwork\/.+darwin"],
        [[VERSION, r"_", "."], [NAME, "iOS"]],
    ],
    # Mac OS
    [
        [r"(mac\sos\sx)\s?([\w\s\.]*)", r"(macintosh|mac(?=_powerpc)\s)(?!.+haiku)"],
        [[NAME, "Mac OS"], [VERSION, r"_", "."]],
    ],
    [[r"(cros)\s[\w]+\s([\w\.]+\w)"], [[NAME, "Chromium OS"], VERSION]],
    # Mobile and embedded
    [
        [
            r"(android|webos|palm\sos|qnx|bada|rim\stablet\sos|meego|sailfish|contiki)[-\/\s]?([\w\.]*)",
            r"(blackberry)\w*\/([\w\.]*)",
            r"(tizen|kaios)[\/\s]([\w\.]+)",
            r"\((series40);",
        ],
        [NAME, VERSION],
    ],
    [[r"\(bb(10);"], [VERSION, [NAME, "BlackBerry"]]],
    [[r"(?:symbian\s?os|symbos|s60(?=;)|series60)[-\/\s]?([\w\.]*)"], [VERSION, [NAME, "Symbian"]]],
    [[r"mozilla.+\(mobile;.+gecko.+firefox"], [[NAME, "Firefox OS"]]],
    # Consoles
    [
        [r"(nintendo|playstation)\s([wids345portablevuch]+)", r"(xbox);\s+xbox\s([^\);]+)"],
        [NAME, VERSION],
    ],
    # Linux and other Unix-like systems
    [
        [
            r"(mint)[\/\s\(\)]?(\w*)",
            r"(mageia|vectorlinux)[;\s]",
            r"(joli|[kxln]?ubuntu|debian|suse|opensuse|gentoo|arch(?=\slinux)|slackware|fedora"
            r"|mandriva|centos|pclinuxos|red\shat|zenwalk|linpus|raspbian|plan\s9|minix|risc\sos"
            r"|contiki|deepin|manjaro|elementary\sos|sabayon|linspire)"
            r"(?:\sgnu\/linux)?(?:\slinux)?[\/\s-]?(?!chrom|package)([-\w\.]*)",
            r"(hurd|linux)\s?([\w\.]*)",
            r"(gnu)\s?([\w\.]*)",
        ],
        [NAME, VERSION],
    ],
    [[r"\b([-frentopcghs]{0,5}bsd|dragonfly)[\/\s]?(?!amd|[ix346]{1,2}86)([\w\.]*)"], [NAME, VERSION]],
    [[r"(haiku)\s(\w+)"], [NAME, VERSION]],
    [[r"(sunos)\s?([\w\.\d]*)"], [[NAME, "Solaris"], VERSION]],
    [
        [
            r"((?:open)?solaris)[-\/\s]?([\w\.]*)",
            r"(aix)\s((\d)(?=\.|\)|\s)[\w\.])*",
            r"(unix)\s?([\w\.]*)",
        ],
        [NAME, VERSION],
    ],
]

CPU_RULES: list[Any] = [
    [[r"((?:amd|x(?:(?:86|64)[-_])?|wow|win)64)[;\)]"], [[ARCHITECTURE, "amd64"]]],
    [[r"(ia32(?=;))"], [[ARCHITECTURE, LOWERIZE]]],
    [[r"((?:i[346]|x)86)[;\)]"], [[ARCHITECTURE, "ia32"]]],
    [[r"\b(aarch64|armv?8e?l?)\b"], [[ARCHITECTURE, "arm64"]]],
    [[r"\b(arm(?:v[67])?ht?n?[fl]p?)\b"], [[ARCHITECTURE, "armhf"]]],
    [[r"windows\s(ce|mobile);\sppc;"], [[ARCHITECTURE, "arm"]]],
    [[r"((?:ppc|powerpc)(?:64)?)(?:\smac|;|\))"], [[ARCHITECTURE, r"ower", "", LOWERIZE]]],
    [[r"(sun4\w)[;\)]"], [[ARCHITECTURE, "sparc"]]],
    [
        [
            r"((?:avr32|ia64(?=;))|68k(?=\))|\barm(?=v(?:[1-7]|[5-7]1)l?|;|eabi)"
            r"|(?:irix|mips|sparc)(?:64)?\b|pa-risc)"
        ],
        [[ARCHITECTURE, LOWERIZE]],
    ],
]

DEVICE_RULES: list[Any] = [
    # Apple
    [[r"\((ipad|playbook);[\w\s\),;-]+(rim|apple)"], [MODEL, VENDOR, [TYPE, TABLET]]],
    [[r"applecoremedia\/[\w\.]+\s\((ipad)"], [MODEL, [VENDOR, "Apple"], [TYPE, TABLET]]],
    [[r"\((ip(?:hone|od)[\s\w]*);"], [MODEL, [VENDOR, "Apple"], [TYPE, MOBILE]]],
    # Samsung
    [
        [r"\b(sch-i[89]0\d|shw-m380s|sm-[ptx]\w{2,4}|gt-[pn]\d{2,4}|sgh-t8[56]9|nexus\s10)"],
        [MODEL, [VENDOR, "Samsung"], [TYPE, TABLET]],
    ],
    [
        [r"\b((?:s[cgp]h|gt|sm)-\w+|galaxy\snexus)", r"samsung[-\w]+\s([\w-]+)", r"sec-(sgh\w+)"],
        [MODEL, [VENDOR, "Samsung"], [TYPE, MOBILE]],
    ],
    # Huawei
    [[r"\b((?:ag[rs][23]|bah2?|sht?|btv)-a?[lw]\d{2})\b"], [MODEL, [VENDOR, "Huawei"], [TYPE, TABLET]]],
    [[r"(?:huawei|honor)([-\w\s]+)\sbuild\/"], [[MODEL, r"^[\s-]+", ""], [VENDOR, "Huawei"], [TYPE, MOBILE]]],
    # Xiaomi
    [
        [
            r"\b(poco[\w\s]+)(?:\sbuild|\))",
            r"\b(hm[-_\s]?note?[_\s]?(?:\d\w)?)\sbuild",
            r"\b(redmi[\-_\s]?(?:note|k)?[\w\s]+?)(?:\sbuild|\))",
            r"\b(mi[-_\s]?(?:a\d|one|note\slte|max|\d{1,2}[a-z]?)(?:[_\s](?:plus|se|lite|pro))?)(?:\sbuild|\))",
        ],
        [[MODEL, r"_", " "], [VENDOR, "Xiaomi"], [TYPE, MOBILE]],
    ],
    [[r"\b(oneplus)[\s_-]?(a?\d[0-9a-z]{2,3})"], [[VENDOR, "OnePlus"], MODEL, [TYPE, MOBILE]]],
    # Google
    [[r"droid.+;\s(pixel\s?(?:c|slate))\b"], [MODEL, [VENDOR, "Google"], [TYPE, TABLET]]],
    [[r"droid.+;\s(pixel[\s\daxl]{0,6})(?:\sbuild|\))"], [MODEL, [VENDOR, "Google"], [TYPE, MOBILE]]],
    [[r"\b(nexus\s[45])\b"], [MODEL, [VENDOR, "LG"], [TYPE, MOBILE]]],
    [[r"\b(nexus\s6)\b"], [MODEL, [VENDOR, "Motorola"], [TYPE, MOBILE]]],
    [[r"\b(nexus\s7)\b"], [MODEL, [VENDOR, "Asus"], [TYPE, TABLET]]],
    [[r"\b(nexus\s9)\b"], [MODEL, [VENDOR, "HTC"], [TYPE, TABLET]]],
    # LG
    [
        [r"\blg[-e;\/\s]+((?!browser|netcast|android\stv)\w+)", r"\blg-?([\d\w]+)\sbuild"],
        [MODEL, [VENDOR, "LG"], [TYPE, MOBILE]],
    ],
    # Sony
    [[r"\bsony[\s_-]?([\w-]+)", r"\b(xperia[\s\w]*?)\sbuild"], [MODEL, [VENDOR, "Sony"], [TYPE, MOBILE]]],
    # Motorola
    [
        [r"\b(mot(?:orola)?[\s-]\w*|xt\d{3,4}|moto\s[\w\s]+?)(?:\sbuild|\)|;)"],
        [MODEL, [VENDOR, "Motorola"], [TYPE, MOBILE]],
    ],
    # HTC
    [[r"\b(htc)[-_\s;\/]*(\w[\w\s]*?)(?:\sbuild|\)|;)"], [VENDOR, [MODEL, r"_", " "], [TYPE, MOBILE]]],
    # Nokia
    [[r"(nokia)[-_\s]*([\w\.-]*)"], [[VENDOR, "Nokia"], MODEL, [TYPE, MOBILE]]],
    # BlackBerry
    [[r"\(bb10;\s(\w+)"], [MODEL, [VENDOR, "BlackBerry"], [TYPE, MOBILE]]],
    [[r"(blackberry)[\s-]?(\w+)"], [[VENDOR, "BlackBerry"], MODEL, [TYPE, MOBILE]]],
    # Amazon
    [[r"\b(kf[a-z]{2,4})\sbuild"], [MODEL, [VENDOR, "Amazon"], [TYPE, TABLET]]],
    [[r"(kindle)\/([\w\.]+)"], [[VENDOR, "Amazon"], [MODEL, "Kindle"], [TYPE, TABLET]]],
    # Consoles
    [[r"(playstation\s[345portablevi]+)"], [MODEL, [VENDOR, "Sony"], [TYPE, CONSOLE]]],
    [[r"\b(xbox(?:\sone)?(?!;\sxbox))[\);]"], [MODEL, [VENDOR, "Microsoft"], [TYPE, CONSOLE]]],
    [[r"(nintendo)[-_\s]?([wids3utch]+)"], [VENDOR, MODEL, [TYPE, CONSOLE]]],
    [[r"\b(ouya)\b"], [VENDOR, [TYPE, CONSOLE]]],
    # Smart TVs
    [[r"smart-tv.+(samsung)"], [VENDOR, [TYPE, SMARTTV]]],
    [[r"hbbtv.+maple;(\d+)"], [[MODEL, r"^", "SmartTV"], [VENDOR, "Samsung"], [TYPE, SMARTTV]]],
    [
        [r"(nux;\snetcast.+smarttv|lg\s(netcast\.tv-201\d|android\stv))"],
        [[VENDOR, "LG"], [TYPE, SMARTTV]],
    ],
    [[r"(apple)\s?tv"], [VENDOR, [MODEL, "Apple TV"], [TYPE, SMARTTV]]],
    [[r"crkey"], [[MODEL, "Chromecast"], [VENDOR, "Google"], [TYPE, SMARTTV]]],
    [[r"droid.+aft(\w)(\s?bui|\))"], [MODEL, [VENDOR, "Amazon"], [TYPE, SMARTTV]]],
    [[r"\b(roku)[\dx]*[\)\/]((?:dvp-)?[\d\.]*)"], [VENDOR, MODEL, [TYPE, SMARTTV]]],
    [
        [r"\b(android\stv|smart[-\s]?tv|opera\stv|smarttv|googletv|tizen.+smart)\b"],
        [[TYPE, SMARTTV]],
    ],
    # Wearables
    [[r"((pebble))app"], [VENDOR, MODEL, [TYPE, WEARABLE]]],
    [[r"droid.+;\s(glass)\s\d"], [MODEL, [VENDOR, "Google"], [TYPE, WEARABLE]]],
    [[r"(watch)(?:\s?os[,\/]|\d,\d\/)[\d\.]+"], [MODEL, [VENDOR, "Apple"], [TYPE, WEARABLE]]],
    # Embedded
    [[r"(tesla)(?:\sqtcarbrowser|\/20\d\d\.[-\w\.]+)"], [VENDOR, [TYPE, EMBEDDED]]],
    # Desktop Macs
    [[r"\((macintosh);"], [MODEL, [VENDOR, "Apple"]]],
    # Samsung devices identified only by a product token
    [[r"\b(samsung)[-_\s]?(\w+)"], [[VENDOR, "Samsung"], MODEL, [TYPE, MOBILE]]],
    # Unbranded Android devices that still report a model
    [
        [
            r"android\s[\d\.]+;\s(?:u;\s)?(?:[a-z]{2}[-_][a-z]{2};\s)?"
            r"([a-z][\w\s\.-]*?\d[\w\.-]*;?)\sbuild\/"
        ],
        [MODEL, [VENDOR, "Generic"]],
    ],
    # Generic form factors
    [[r"\b(tablet|tab)[;\/]", r"\b(mobile)(?:[;\/]|\ssafari)"], [[TYPE, LOWERIZE], VENDOR, MODEL]],
]


DEFAULT_RULES: dict[str, Any] = {
    "version": "2026.10",
    "last_updated": "2026-10-19",
    "browser": BROWSER_RULES,
    "engine": ENGINE_RULES,
    "os": OS_RULES,
    "cpu": CPU_RULES,
    "device": DEVICE_RULES,
}
