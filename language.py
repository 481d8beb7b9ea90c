TEXTS = {
    "usage": (
        "📝 使い方:\n\n"
        "【登録】\n"
        "ランチ 1200\n"
        "スーパー 4500 食費\n"
        "家賃 70000 固定\n\n"
        "【コマンド】\n"
        "今月 → 月次集計\n"
        "固定一覧 → 固定費一覧\n"
        "残高 → 通算残高・支出分析"
    ),
    "fetch_failed": "⚠️ データ取得に失敗しました。",
    "insert_failed": "⚠️ 登録に失敗しました。もう一度お試しください。",
    "chart_link": "📊 グラフ: {url}",
    "balance_chart_link": "📈 残高推移: {url}",
    "monthly_chart_title": "{month} 支出内訳",
    "analysis_chart_title": "支出分析（通算）",
}
