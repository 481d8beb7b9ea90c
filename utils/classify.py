INCOME_LABEL = "収入"
DEFAULT_CATEGORY = "その他"

INCOME_KEYWORDS = ("給料", "給与", "ボーナス", "賞与", "収入", "副業", "報酬", "salary", "bonus")

# порядок важен: побеждает первое совпадение
CATEGORY_RULES = (
    ("食費", ("ランチ", "昼食", "夕食", "朝食", "ご飯", "弁当", "スーパー", "コンビニ", "カフェ", "外食", "食")),
    ("交通費", ("電車", "バス", "タクシー", "新幹線", "定期", "ガソリン", "駐車")),
    ("住居費", ("家賃", "管理費", "住宅", "ローン")),
    ("光熱費", ("電気", "ガス", "水道")),
    ("通信費", ("スマホ", "携帯", "電話", "ネット", "Wi-Fi", "wifi")),
    ("娯楽", ("映画", "ゲーム", "本", "漫画", "旅行", "カラオケ", "サブスク")),
)


def is_income(description: str) -> bool:
    return any(w in description for w in INCOME_KEYWORDS)


def classify_type(description: str) -> str:
    return "income" if is_income(description) else "expense"


def classify_category(description: str, tx_type: str) -> str:
    if tx_type == "income":
        return INCOME_LABEL
    for category, words in CATEGORY_RULES:
        if any(w in description for w in words):
            return category
    return DEFAULT_CATEGORY
