"""Chinese Pinyin map for frequent characters, and stop words.

Each hanzi is one syllable, so every value carries a trailing space and a
run of characters becomes separate words.
"""

from __future__ import annotations

_PINYIN = {
    "一": "yi", "二": "er", "三": "san", "四": "si", "五": "wu",
    "六": "liu", "七": "qi", "八": "ba", "九": "jiu", "十": "shi",
    "百": "bai", "千": "qian", "万": "wan", "亿": "yi",
    "中": "zhong", "国": "guo", "人": "ren", "大": "da", "小": "xiao",
    "上": "shang", "下": "xia", "左": "zuo", "右": "you", "前": "qian",
    "后": "hou", "东": "dong", "西": "xi", "南": "nan", "北": "bei",
    "年": "nian", "月": "yue", "日": "ri", "时": "shi", "分": "fen",
    "秒": "miao", "天": "tian", "地": "di", "男": "nan", "女": "nv",
    "水": "shui", "火": "huo", "木": "mu", "金": "jin", "土": "tu",
    "风": "feng", "雨": "yu", "雪": "xue", "云": "yun", "电": "dian",
    "话": "hua", "手": "shou", "机": "ji", "家": "jia", "学": "xue",
    "校": "xiao", "生": "sheng", "老": "lao", "师": "shi", "书": "shu",
    "本": "ben", "字": "zi", "画": "hua", "音": "yin", "乐": "le",
    "爱": "ai", "情": "qing", "心": "xin", "想": "xiang", "思": "si",
    "意": "yi", "见": "jian", "听": "ting", "说": "shuo", "读": "du",
    "写": "xie", "看": "kan", "走": "zou", "跑": "pao", "吃": "chi",
    "喝": "he", "睡": "shui", "觉": "jue", "做": "zuo", "作": "zuo",
    "工": "gong", "打": "da", "开": "kai", "关": "guan", "来": "lai",
    "去": "qu", "回": "hui", "到": "dao", "有": "you", "没": "mei",
    "是": "shi", "不": "bu", "的": "de", "了": "le", "在": "zai",
    "和": "he", "与": "yu", "或": "huo", "这": "zhe", "那": "na",
    "哪": "na", "谁": "shei", "什": "shen", "么": "me", "为": "wei",
    "因": "yin", "所": "suo", "以": "yi", "就": "jiu", "也": "ye",
    "都": "dou", "很": "hen", "太": "tai", "非": "fei", "常": "chang",
    "好": "hao", "坏": "huai", "对": "dui", "错": "cuo", "新": "xin",
    "旧": "jiu", "快": "kuai", "慢": "man", "高": "gao", "低": "di",
    "长": "chang", "短": "duan", "多": "duo", "少": "shao", "早": "zao",
    "晚": "wan", "美": "mei", "丽": "li", "明": "ming", "白": "bai",
    "黑": "hei", "红": "hong", "绿": "lv", "蓝": "lan", "黄": "huang",
    "紫": "zi", "你": "ni", "我": "wo", "他": "ta", "她": "ta",
    "们": "men", "世": "shi", "界": "jie", "文": "wen", "语": "yu",
    "北京": "beijing", "上海": "shanghai",
}

_PUNCTUATION = {
    "，": " ",
    "。": " ",
    "！": "",
    "？": "",
    "；": " ",
    "：": " ",
    "（": " ",
    "）": " ",
    "～": " ",
}

CHARMAP = {
    **{hanzi: f"{syllable} " for hanzi, syllable in _PINYIN.items()},
    **_PUNCTUATION,
}

STOP_WORDS = frozenset(
    {
        "的", "了", "和", "是", "就", "都", "而", "及", "与", "着",
        "或", "一", "不", "在", "人", "有", "为", "以", "于", "上",
        "他", "后", "之", "来", "因", "下", "可", "到", "由",
        "这", "些", "会", "也", "此", "但", "并", "个", "其", "已",
        "无", "小", "我", "们", "起", "最", "再", "今", "去", "好",
    }
)
