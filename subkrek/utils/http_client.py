"""简易 HTTP 客户端封装（requests）"""
import requests

DEFAULT_USER_AGENT = 'Mozilla/5.0 (compatible; subkrek)'


class HttpClient:
    def __init__(self, timeout=30, user_agent=DEFAULT_USER_AGENT):
        self.session = requests.Session()
        self.session.headers['User-Agent'] = user_agent
        self.timeout = timeout

    def get(self, url, **kwargs):
        kwargs.setdefault('timeout', self.timeout)
        return self.session.get(url, **kwargs)

    def close(self):
        self.session.close()
