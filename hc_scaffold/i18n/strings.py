"""UI string tables, keyed by locale."""

STRINGS = {
    "en": {
        "langName": "English",
        "pageTitle": "Holochain Scaffold Quick Start",
        "chooseLanguage": "Choose a language",
        "menu": "Menu",
        "language": "Language",
        "about": "About",
        "version": "Version {0}",
        "newDocument": "New",
        "upload": "Upload",
        "download": "Download YAML",
        "toggleYaml": "Show / Hide YAML",
        "appName": "Application Name",
        "appNamePlaceholder": "my-app",
        "appDescription": "Application Description",
        "zomes": "Zomes",
        "addZome": "Add Zome",
        "deleteZome": "Delete Zome",
        "zomeName": "Zome Name",
        "zomeDescription": "Zome Description",
        "entries": "Entries",
        "addEntry": "Add Entry",
        "entryName": "Entry Name",
        "dataFormat": "Data Format",
        "sharing": "Sharing",
        "crud": "CRUD Functions",
        "create": "Create",
        "read": "Read",
        "update": "Update",
        "delete": "Delete",
        "functions": "Functions",
        "addFunction": "Add Function",
        "functionName": "Function Name",
        "callingType": "Calling Type",
        "exposure": "Exposure",
        "remove": "Remove",
        "yamlTitle": "Scaffold YAML",
    },
    "ja": {
        "langName": "日本語",
        "pageTitle": "Holochain スキャフォールド クイックスタート",
        "chooseLanguage": "言語を選択してください",
        "menu": "メニュー",
        "language": "言語",
        "about": "このアプリについて",
        "version": "バージョン {0}",
        "newDocument": "新規作成",
        "upload": "アップロード",
        "download": "YAML をダウンロード",
        "toggleYaml": "YAML の表示 / 非表示",
        "appName": "アプリケーション名",
        "appNamePlaceholder": "my-app",
        "appDescription": "アプリケーションの説明",
        "zomes": "ゾーム",
        "addZome": "ゾームを追加",
        "deleteZome": "ゾームを削除",
        "zomeName": "ゾーム名",
        "zomeDescription": "ゾームの説明",
        "entries": "エントリー",
        "addEntry": "エントリーを追加",
        "entryName": "エントリー名",
        "dataFormat": "データ形式",
        "sharing": "共有",
        "crud": "CRUD 関数",
        "create": "作成",
        "read": "読取",
        "update": "更新",
        "delete": "削除",
        "functions": "関数",
        "addFunction": "関数を追加",
        "functionName": "関数名",
        "callingType": "呼び出し形式",
        "exposure": "公開範囲",
        "remove": "削除",
        "yamlTitle": "スキャフォールド YAML",
    },
}
