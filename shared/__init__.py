"""共通モジュール（設定・ログ・スキーマ）"""
