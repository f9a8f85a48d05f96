# contactform/lib/messages.py
# Fixed user-facing strings (ko-KR). Everything the user or the inbox sees lives here.

# inline field errors
NAME_REQUIRED = "이름을 입력해주세요"
EMAIL_REQUIRED = "이메일을 입력해주세요"
EMAIL_INVALID = "올바른 이메일 형식을 입력해주세요"
SUBJECT_REQUIRED = "제목을 입력해주세요"
MESSAGE_REQUIRED = "메시지를 입력해주세요"
MESSAGE_TOO_SHORT = "메시지는 최소 10자 이상 입력해주세요"

# status banners
SUBMIT_SUCCESS = "메시지가 성공적으로 전송되었습니다! 빠른 시일 내에 답변드리겠습니다."
SUBMIT_FAILURE = "메시지 전송에 실패했습니다. 잠시 후 다시 시도해주세요."

# buttons
SUBMIT_LABEL = "메시지 전송하기"
SUBMITTING_LABEL = "전송 중..."
NEW_MESSAGE_LABEL = "새 메시지 작성하기"
RETRY_LABEL = "다시 시도하기"

# relay responses
RELAY_SENT = "메일이 성공적으로 전송되었습니다!"
RELAY_INTERNAL_ERROR = "메일 전송 중 오류가 발생했습니다."

# outgoing email body
EMAIL_HEADING = "새로운 문의가 접수되었습니다"
EMAIL_SENDER_SECTION = "문의자 정보"
EMAIL_NAME = "이름"
EMAIL_EMAIL = "이메일"
EMAIL_SUBJECT = "제목"
EMAIL_BODY_SECTION = "문의 내용"
EMAIL_FOOTER_AUTO = "이 메일은 웹사이트 문의 폼을 통해 자동으로 발송되었습니다."
EMAIL_FOOTER_REPLY = "답변을 원하시면 위의 이메일 주소로 직접 회신해주세요."
