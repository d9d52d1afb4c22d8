import logging

from roadmap.models import LevelColor
from roadmap.store import MemoryStore, utcnow

logger = logging.getLogger(__name__)

DEFAULT_LEVELS = [
    {
        "level_number": 1, "title": "1枚ページの作成", "color": LevelColor.success,
        "description": "HTML/CSSでシンプルなウェブページを作成",
        "tasks": ["HTML基本構造の理解", "CSS基本スタイリング", "レスポンシブデザインの実装"],
    },
    {
        "level_number": 2, "title": "オフィスツールの自動化", "color": LevelColor.secondary,
        "description": "PythonでExcelやPDF処理を自動化",
        "tasks": [
            "Python基礎学習", "Excel自動化スクリプト作成", "PDFファイル処理自動化",
            "メール送信自動化", "データ収集・分析自動化",
        ],
    },
    {
        "level_number": 3, "title": "Webサービス開発", "color": LevelColor.primary,
        "description": "JavaScriptでWebアプリケーションを開発",
        "tasks": [
            "JavaScript基礎学習", "Node.js環境構築", "データベース設計・接続",
            "API開発", "フロントエンド統合",
        ],
    },
    {
        "level_number": 4, "title": "自分PCで独自プログラム", "color": LevelColor.accent,
        "description": "デスクトップアプリケーションの開発",
        "tasks": [
            "デスクトップアプリ開発環境構築", "GUI フレームワーク学習", "ファイルシステム操作",
            "外部ライブラリ活用", "アプリケーション配布",
        ],
    },
    {
        "level_number": 5, "title": "開発環境とWebサービスを連携", "color": LevelColor.warning,
        "description": "API連携とクラウドサービス活用",
        "tasks": [
            "クラウドサービス基礎", "API設計・実装", "認証・認可システム",
            "データベース連携", "デプロイメント自動化",
        ],
    },
    {
        "level_number": 6, "title": "コードをGit管理", "color": LevelColor.danger,
        "description": "バージョン管理とチーム開発",
        "tasks": ["Git基本操作", "ブランチ戦略", "コードレビュー", "CI/CD構築", "チーム開発フロー"],
    },
    {
        "level_number": 7, "title": "Copilot & コーディングエージェント活用", "color": LevelColor.purple,
        "description": "AI支援によるコーディング効率化",
        "tasks": [
            "GitHub Copilot活用", "コード生成AI活用", "プロンプトエンジニアリング",
            "AI支援デバッグ", "効率的な開発フロー確立",
        ],
    },
]


def seed_roadmap(store: MemoryStore) -> int:
    """Load the default roadmap into an empty store. Returns levels added."""
    if len(store.levels):
        logger.info("Roadmap already seeded")
        return 0

    for data in DEFAULT_LEVELS:
        data = dict(data)
        task_titles = data.pop("tasks")
        level = store.levels.create(**data)
        for order, title in enumerate(task_titles):
            store.tasks.create(level_id=level.id, title=title, order=order)

    if store.user_stats.get() is None:
        store.user_stats.update({"last_activity_date": utcnow()})

    logger.info("Seeded %d levels", len(DEFAULT_LEVELS))
    return len(DEFAULT_LEVELS)
