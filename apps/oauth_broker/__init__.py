"""OAuth Broker Service.

GitHub/GitLab/Bitbucket OAuth 인가 코드 플로우를 중계하는 서비스입니다.
"""
