import os


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-prod')
    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Pairing
    ALLOW_TRIPLE = os.getenv('ALLOW_TRIPLE', 'true').lower() == 'true'
    PAIRING_SEED = int(os.environ['PAIRING_SEED']) if os.getenv('PAIRING_SEED') else None
    MAX_PARTICIPANTS = int(os.getenv('MAX_PARTICIPANTS', '1024'))

    # Backend-as-a-service (auth + document database) used by the web client
    BACKEND_API_KEY = os.getenv('BACKEND_API_KEY', '')
    BACKEND_AUTH_DOMAIN = os.getenv('BACKEND_AUTH_DOMAIN', '')
    BACKEND_PROJECT_ID = os.getenv('BACKEND_PROJECT_ID', '')
    BACKEND_STORAGE_BUCKET = os.getenv('BACKEND_STORAGE_BUCKET', '')
    BACKEND_MESSAGING_SENDER_ID = os.getenv('BACKEND_MESSAGING_SENDER_ID', '')
    BACKEND_APP_ID = os.getenv('BACKEND_APP_ID', '')

    @classmethod
    def backend_settings(cls) -> dict:
        return {
            'apiKey': cls.BACKEND_API_KEY,
            'authDomain': cls.BACKEND_AUTH_DOMAIN,
            'projectId': cls.BACKEND_PROJECT_ID,
            'storageBucket': cls.BACKEND_STORAGE_BUCKET,
            'messagingSenderId': cls.BACKEND_MESSAGING_SENDER_ID,
            'appId': cls.BACKEND_APP_ID,
        }


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    PAIRING_SEED = 1234
    MAX_PARTICIPANTS = 16


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
