# bitfn/text/mappings.py
"""
ASCII equivalents for non-ASCII characters used by the slug transcoder.

The table is visual rather than linguistic: thorn becomes ``p`` because it
looks like one, not ``th``. Keys are single code points that survive NFD
(characters with a canonical decomposition are handled by dropping their
combining marks instead). Values only contain ASCII letters, digits,
underscores and balanced parentheses.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

__all__ = ["ASCII_EQUIVALENTS", "lookup"]

_TABLE = {
    # Germanic / Nordic letters
    "\u00b5": "u",  # µ micro sign
    "\u00d0": "D",  # Ð eth
    "\u00f0": "d",  # ð
    "\u00d8": "O",  # Ø o with stroke
    "\u00f8": "o",  # ø
    "\u00de": "P",  # Þ thorn
    "\u00fe": "p",  # þ
    # Ligatures
    "\u00c6": "AE",  # Æ
    "\u00e6": "ae",  # æ
    "\u0152": "OE",  # Œ
    "\u0153": "oe",  # œ
    "\u1e9e": "SS",  # ẞ capital sharp s
    "\u00df": "ss",  # ß
    "\u0132": "IJ",  # Ĳ
    "\u0133": "ij",  # ĳ
    "\u01c4": "DZ",  # Ǆ
    "\u01c5": "Dz",  # ǅ
    "\u01c6": "dz",  # ǆ
    "\u01c7": "LJ",  # Ǉ
    "\u01c8": "Lj",  # ǈ
    "\u01c9": "lj",  # ǉ
    "\u01ca": "NJ",  # Ǌ
    "\u01cb": "Nj",  # ǋ
    "\u01cc": "nj",  # ǌ
    "\u01f1": "DZ",  # Ǳ
    "\u01f2": "Dz",  # ǲ
    "\u01f3": "dz",  # ǳ
    "\ufb00": "ff",  # ﬀ
    "\ufb01": "fi",  # ﬁ
    "\ufb02": "fl",  # ﬂ
    "\ufb03": "ffi",  # ﬃ
    "\ufb04": "ffl",  # ﬄ
    "\ufb05": "st",  # ﬅ long s t
    "\ufb06": "st",  # ﬆ
    # Stroked, barred and hooked letters
    "\u0110": "D",  # Đ
    "\u0111": "d",  # đ
    "\u0126": "H",  # Ħ
    "\u0127": "h",  # ħ
    "\u0131": "i",  # ı dotless i
    "\u0138": "k",  # ĸ kra
    "\u013f": "L",  # Ŀ
    "\u0140": "l",  # ŀ
    "\u0141": "L",  # Ł
    "\u0142": "l",  # ł
    "\u0149": "n",  # ŉ
    "\u014a": "N",  # Ŋ eng
    "\u014b": "n",  # ŋ
    "\u0166": "T",  # Ŧ
    "\u0167": "t",  # ŧ
    "\u017f": "s",  # ſ long s
    "\u0180": "b",  # ƀ
    "\u0181": "B",  # Ɓ
    "\u0187": "C",  # Ƈ
    "\u0188": "c",  # ƈ
    "\u018a": "D",  # Ɗ
    "\u0191": "F",  # Ƒ
    "\u0192": "f",  # ƒ
    "\u0193": "G",  # Ɠ
    "\u0197": "I",  # Ɨ
    "\u0198": "K",  # Ƙ
    "\u0199": "k",  # ƙ
    "\u019a": "l",  # ƚ
    "\u019d": "N",  # Ɲ
    "\u019e": "n",  # ƞ
    "\u019f": "O",  # Ɵ
    "\u01a4": "P",  # Ƥ
    "\u01a5": "p",  # ƥ
    "\u01ab": "t",  # ƫ
    "\u01ac": "T",  # Ƭ
    "\u01ad": "t",  # ƭ
    "\u01ae": "T",  # Ʈ
    "\u01b2": "V",  # Ʋ
    "\u01b3": "Y",  # Ƴ
    "\u01b4": "y",  # ƴ
    "\u01b5": "Z",  # Ƶ
    "\u01b6": "z",  # ƶ
    "\u01e4": "G",  # Ǥ
    "\u01e5": "g",  # ǥ
    "\u0224": "Z",  # Ȥ
    "\u0225": "z",  # ȥ
    "\u0237": "j",  # ȷ dotless j
    "\u023a": "A",  # Ⱥ
    "\u023b": "C",  # Ȼ
    "\u023c": "c",  # ȼ
    "\u023d": "L",  # Ƚ
    "\u023e": "T",  # Ⱦ
    "\u0243": "B",  # Ƀ
    "\u0244": "U",  # Ʉ
    "\u0246": "E",  # Ɇ
    "\u0247": "e",  # ɇ
    "\u0248": "J",  # Ɉ
    "\u0249": "j",  # ɉ
    "\u024c": "R",  # Ɍ
    "\u024d": "r",  # ɍ
    "\u024e": "Y",  # Ɏ
    "\u024f": "y",  # ɏ
    "\u0253": "b",  # ɓ
    "\u0257": "d",  # ɗ
    "\u0260": "g",  # ɠ
    "\u0266": "h",  # ɦ
    "\u0268": "i",  # ɨ
    "\u0271": "m",  # ɱ
    "\u0272": "n",  # ɲ
    "\u0275": "o",  # ɵ
    "\u0282": "s",  # ʂ
    "\u0288": "t",  # ʈ
    "\u0289": "u",  # ʉ
    "\u028b": "v",  # ʋ
    "\u02a0": "q",  # ʠ
    "\u2c60": "L",  # Ⱡ
    "\u2c61": "l",  # ⱡ
    "\u2c63": "P",  # Ᵽ
    "\u2c64": "R",  # Ɽ
    "\u2c65": "a",  # ⱥ
    "\u2c66": "t",  # ⱦ
    "\u1d7d": "p",  # ᵽ
    # Ordinal indicators
    "\u00aa": "a",  # ª
    "\u00ba": "o",  # º
    # Superscript digits
    "\u2070": "0",  # ⁰
    "\u00b9": "1",  # ¹
    "\u00b2": "2",  # ²
    "\u00b3": "3",  # ³
    "\u2074": "4",  # ⁴
    "\u2075": "5",  # ⁵
    "\u2076": "6",  # ⁶
    "\u2077": "7",  # ⁷
    "\u2078": "8",  # ⁸
    "\u2079": "9",  # ⁹
    # Subscript digits
    "\u2080": "0",  # ₀
    "\u2081": "1",  # ₁
    "\u2082": "2",  # ₂
    "\u2083": "3",  # ₃
    "\u2084": "4",  # ₄
    "\u2085": "5",  # ₅
    "\u2086": "6",  # ₆
    "\u2087": "7",  # ₇
    "\u2088": "8",  # ₈
    "\u2089": "9",  # ₉
    # Modifier (superscript) letters
    "\u1d2c": "A",  # ᴬ
    "\u1d2e": "B",  # ᴮ
    "\u1d30": "D",  # ᴰ
    "\u1d31": "E",  # ᴱ
    "\u1d33": "G",  # ᴳ
    "\u1d34": "H",  # ᴴ
    "\u1d35": "I",  # ᴵ
    "\u1d36": "J",  # ᴶ
    "\u1d37": "K",  # ᴷ
    "\u1d38": "L",  # ᴸ
    "\u1d39": "M",  # ᴹ
    "\u1d3a": "N",  # ᴺ
    "\u1d3c": "O",  # ᴼ
    "\u1d3e": "P",  # ᴾ
    "\u1d3f": "R",  # ᴿ
    "\u1d40": "T",  # ᵀ
    "\u1d41": "U",  # ᵁ
    "\u2c7d": "V",  # ⱽ
    "\u1d42": "W",  # ᵂ
    "\u1d43": "a",  # ᵃ
    "\u1d47": "b",  # ᵇ
    "\u1d9c": "c",  # ᶜ
    "\u1d48": "d",  # ᵈ
    "\u1d49": "e",  # ᵉ
    "\u1da0": "f",  # ᶠ
    "\u1d4d": "g",  # ᵍ
    "\u02b0": "h",  # ʰ
    "\u2071": "i",  # ⁱ
    "\u02b2": "j",  # ʲ
    "\u1d4f": "k",  # ᵏ
    "\u02e1": "l",  # ˡ
    "\u1d50": "m",  # ᵐ
    "\u207f": "n",  # ⁿ
    "\u1d52": "o",  # ᵒ
    "\u1d56": "p",  # ᵖ
    "\u02b3": "r",  # ʳ
    "\u02e2": "s",  # ˢ
    "\u1d57": "t",  # ᵗ
    "\u1d58": "u",  # ᵘ
    "\u1d5b": "v",  # ᵛ
    "\u02b7": "w",  # ʷ
    "\u02e3": "x",  # ˣ
    "\u02b8": "y",  # ʸ
    "\u1dbb": "z",  # ᶻ
    # Subscript letters
    "\u2090": "a",  # ₐ
    "\u2091": "e",  # ₑ
    "\u2095": "h",  # ₕ
    "\u1d62": "i",  # ᵢ
    "\u2c7c": "j",  # ⱼ
    "\u2096": "k",  # ₖ
    "\u2097": "l",  # ₗ
    "\u2098": "m",  # ₘ
    "\u2099": "n",  # ₙ
    "\u2092": "o",  # ₒ
    "\u209a": "p",  # ₚ
    "\u1d63": "r",  # ᵣ
    "\u209b": "s",  # ₛ
    "\u209c": "t",  # ₜ
    "\u1d64": "u",  # ᵤ
    "\u1d65": "v",  # ᵥ
    "\u2093": "x",  # ₓ
    # Fullwidth forms
    "\uff3f": "_",  # ＿ fullwidth low line
    "\uff10": "0",  # ０
    "\uff11": "1",  # １
    "\uff12": "2",  # ２
    "\uff13": "3",  # ３
    "\uff14": "4",  # ４
    "\uff15": "5",  # ５
    "\uff16": "6",  # ６
    "\uff17": "7",  # ７
    "\uff18": "8",  # ８
    "\uff19": "9",  # ９
    "\uff21": "A",  # Ａ
    "\uff22": "B",  # Ｂ
    "\uff23": "C",  # Ｃ
    "\uff24": "D",  # Ｄ
    "\uff25": "E",  # Ｅ
    "\uff26": "F",  # Ｆ
    "\uff27": "G",  # Ｇ
    "\uff28": "H",  # Ｈ
    "\uff29": "I",  # Ｉ
    "\uff2a": "J",  # Ｊ
    "\uff2b": "K",  # Ｋ
    "\uff2c": "L",  # Ｌ
    "\uff2d": "M",  # Ｍ
    "\uff2e": "N",  # Ｎ
    "\uff2f": "O",  # Ｏ
    "\uff30": "P",  # Ｐ
    "\uff31": "Q",  # Ｑ
    "\uff32": "R",  # Ｒ
    "\uff33": "S",  # Ｓ
    "\uff34": "T",  # Ｔ
    "\uff35": "U",  # Ｕ
    "\uff36": "V",  # Ｖ
    "\uff37": "W",  # Ｗ
    "\uff38": "X",  # Ｘ
    "\uff39": "Y",  # Ｙ
    "\uff3a": "Z",  # Ｚ
    "\uff41": "a",  # ａ
    "\uff42": "b",  # ｂ
    "\uff43": "c",  # ｃ
    "\uff44": "d",  # ｄ
    "\uff45": "e",  # ｅ
    "\uff46": "f",  # ｆ
    "\uff47": "g",  # ｇ
    "\uff48": "h",  # ｈ
    "\uff49": "i",  # ｉ
    "\uff4a": "j",  # ｊ
    "\uff4b": "k",  # ｋ
    "\uff4c": "l",  # ｌ
    "\uff4d": "m",  # ｍ
    "\uff4e": "n",  # ｎ
    "\uff4f": "o",  # ｏ
    "\uff50": "p",  # ｐ
    "\uff51": "q",  # ｑ
    "\uff52": "r",  # ｒ
    "\uff53": "s",  # ｓ
    "\uff54": "t",  # ｔ
    "\uff55": "u",  # ｕ
    "\uff56": "v",  # ｖ
    "\uff57": "w",  # ｗ
    "\uff58": "x",  # ｘ
    "\uff59": "y",  # ｙ
    "\uff5a": "z",  # ｚ
    # Circled numbers
    "\u24ea": "(0)",  # ⓪
    "\u2460": "(1)",  # ①
    "\u2461": "(2)",  # ②
    "\u2462": "(3)",  # ③
    "\u2463": "(4)",  # ④
    "\u2464": "(5)",  # ⑤
    "\u2465": "(6)",  # ⑥
    "\u2466": "(7)",  # ⑦
    "\u2467": "(8)",  # ⑧
    "\u2468": "(9)",  # ⑨
    "\u2469": "(10)",  # ⑩
    "\u246a": "(11)",  # ⑪
    "\u246b": "(12)",  # ⑫
    "\u246c": "(13)",  # ⑬
    "\u246d": "(14)",  # ⑭
    "\u246e": "(15)",  # ⑮
    "\u246f": "(16)",  # ⑯
    "\u2470": "(17)",  # ⑰
    "\u2471": "(18)",  # ⑱
    "\u2472": "(19)",  # ⑲
    "\u2473": "(20)",  # ⑳
    # Parenthesized numbers
    "\u2474": "(1)",  # ⑴
    "\u2475": "(2)",  # ⑵
    "\u2476": "(3)",  # ⑶
    "\u2477": "(4)",  # ⑷
    "\u2478": "(5)",  # ⑸
    "\u2479": "(6)",  # ⑹
    "\u247a": "(7)",  # ⑺
    "\u247b": "(8)",  # ⑻
    "\u247c": "(9)",  # ⑼
    "\u247d": "(10)",  # ⑽
    "\u247e": "(11)",  # ⑾
    "\u247f": "(12)",  # ⑿
    "\u2480": "(13)",  # ⒀
    "\u2481": "(14)",  # ⒁
    "\u2482": "(15)",  # ⒂
    "\u2483": "(16)",  # ⒃
    "\u2484": "(17)",  # ⒄
    "\u2485": "(18)",  # ⒅
    "\u2486": "(19)",  # ⒆
    "\u2487": "(20)",  # ⒇
    # Parenthesized letters
    "\u249c": "(a)",  # ⒜
    "\u249d": "(b)",  # ⒝
    "\u249e": "(c)",  # ⒞
    "\u249f": "(d)",  # ⒟
    "\u24a0": "(e)",  # ⒠
    "\u24a1": "(f)",  # ⒡
    "\u24a2": "(g)",  # ⒢
    "\u24a3": "(h)",  # ⒣
    "\u24a4": "(i)",  # ⒤
    "\u24a5": "(j)",  # ⒥
    "\u24a6": "(k)",  # ⒦
    "\u24a7": "(l)",  # ⒧
    "\u24a8": "(m)",  # ⒨
    "\u24a9": "(n)",  # ⒩
    "\u24aa": "(o)",  # ⒪
    "\u24ab": "(p)",  # ⒫
    "\u24ac": "(q)",  # ⒬
    "\u24ad": "(r)",  # ⒭
    "\u24ae": "(s)",  # ⒮
    "\u24af": "(t)",  # ⒯
    "\u24b0": "(u)",  # ⒰
    "\u24b1": "(v)",  # ⒱
    "\u24b2": "(w)",  # ⒲
    "\u24b3": "(x)",  # ⒳
    "\u24b4": "(y)",  # ⒴
    "\u24b5": "(z)",  # ⒵
    # Circled letters
    "\u24b6": "(A)",  # Ⓐ
    "\u24b7": "(B)",  # Ⓑ
    "\u24b8": "(C)",  # Ⓒ
    "\u24b9": "(D)",  # Ⓓ
    "\u24ba": "(E)",  # Ⓔ
    "\u24bb": "(F)",  # Ⓕ
    "\u24bc": "(G)",  # Ⓖ
    "\u24bd": "(H)",  # Ⓗ
    "\u24be": "(I)",  # Ⓘ
    "\u24bf": "(J)",  # Ⓙ
    "\u24c0": "(K)",  # Ⓚ
    "\u24c1": "(L)",  # Ⓛ
    "\u24c2": "(M)",  # Ⓜ
    "\u24c3": "(N)",  # Ⓝ
    "\u24c4": "(O)",  # Ⓞ
    "\u24c5": "(P)",  # Ⓟ
    "\u24c6": "(Q)",  # Ⓠ
    "\u24c7": "(R)",  # Ⓡ
    "\u24c8": "(S)",  # Ⓢ
    "\u24c9": "(T)",  # Ⓣ
    "\u24ca": "(U)",  # Ⓤ
    "\u24cb": "(V)",  # Ⓥ
    "\u24cc": "(W)",  # Ⓦ
    "\u24cd": "(X)",  # Ⓧ
    "\u24ce": "(Y)",  # Ⓨ
    "\u24cf": "(Z)",  # Ⓩ
    "\u24d0": "(a)",  # ⓐ
    "\u24d1": "(b)",  # ⓑ
    "\u24d2": "(c)",  # ⓒ
    "\u24d3": "(d)",  # ⓓ
    "\u24d4": "(e)",  # ⓔ
    "\u24d5": "(f)",  # ⓕ
    "\u24d6": "(g)",  # ⓖ
    "\u24d7": "(h)",  # ⓗ
    "\u24d8": "(i)",  # ⓘ
    "\u24d9": "(j)",  # ⓙ
    "\u24da": "(k)",  # ⓚ
    "\u24db": "(l)",  # ⓛ
    "\u24dc": "(m)",  # ⓜ
    "\u24dd": "(n)",  # ⓝ
    "\u24de": "(o)",  # ⓞ
    "\u24df": "(p)",  # ⓟ
    "\u24e0": "(q)",  # ⓠ
    "\u24e1": "(r)",  # ⓡ
    "\u24e2": "(s)",  # ⓢ
    "\u24e3": "(t)",  # ⓣ
    "\u24e4": "(u)",  # ⓤ
    "\u24e5": "(v)",  # ⓥ
    "\u24e6": "(w)",  # ⓦ
    "\u24e7": "(x)",  # ⓧ
    "\u24e8": "(y)",  # ⓨ
    "\u24e9": "(z)",  # ⓩ
}

ASCII_EQUIVALENTS: Mapping[str, str] = MappingProxyType(_TABLE)


def lookup(ch: str) -> str | None:
    """
    Return the ASCII equivalent of a single character, or ``None``.

    ``None`` only means the character has no entry; it is not an error.
    """
    return _TABLE.get(ch)
