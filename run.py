# run.py
from dotenv import load_dotenv
import os

basedir = os.path.abspath(os.path.dirname(__file__))
# 실행 디렉터리와 관계없이 프로젝트 루트의 .env 파일을 로드합니다.
load_dotenv(dotenv_path=os.path.join(basedir, '.env'))

from gatorkut import create_app

app = create_app()

if __name__ == '__main__':
    host = app.config.get('HOST', '127.0.0.1')
    port = int(app.config.get('PORT', 3000))
    debug = app.config.get('DEBUG', False)
    app.logger.info(f"Gatorkut API listening on {port}")
    app.run(host=host, port=port, debug=debug)
