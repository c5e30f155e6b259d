"""Invite notification email."""

from gate.domain.service.email_dispatcher import EmailMessage
from gate.domain.value import InviteCode

INVITE_SUBJECT = "Your Exclusive Curry2Cakes Invite Code"

_STYLE = """
    body { font-family: 'Inter', Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { text-align: center; margin-bottom: 30px; }
    .logo { font-size: 24px; font-weight: bold; color: #8B4513; }
    .accent { color: #FF6347; }
    .invite-code {
      background: #F5F5F7;
      padding: 20px;
      text-align: center;
      border-radius: 12px;
      margin: 20px 0;
      border: 2px dashed #8B4513;
    }
    .code {
      font-size: 24px;
      font-weight: bold;
      color: #8B4513;
      font-family: monospace;
      letter-spacing: 2px;
    }
    .footer { text-align: center; margin-top: 30px; color: #666; font-size: 14px; }
"""


def build_invite_email(
    to: str,
    code: InviteCode,
    from_email: str,
    name: str = "",
    ttl_days: int = 30,
) -> EmailMessage:
    """Build the invite notification for one recipient.

    Args:
        to: Recipient address
        code: Issued invite code
        from_email: Sender address
        name: Recipient display name, greeting falls back to "Hello," when empty
        ttl_days: Validity period mentioned in the body

    Returns:
        Message ready for dispatch
    """
    greeting = f"Hello {name}," if name else "Hello,"
    html = f"""<!DOCTYPE html>
<html>
<head>
  <style>{_STYLE}</style>
</head>
<body>
  <div class="container">
    <div class="header">
      <div class="logo">CURRY<span class="accent">2</span>CAKES</div>
      <p>From Spicy to Sweet!</p>
    </div>

    <h2>Welcome to the Inner Circle!</h2>

    <p>{greeting}</p>

    <p>You've been granted exclusive access to Curry2Cakes, where we craft an
    unforgettable journey from savory curries to decadent desserts.</p>

    <div class="invite-code">
      <p><strong>Your Exclusive Invite Code:</strong></p>
      <div class="code">{code.root}</div>
    </div>

    <p><strong>How to redeem:</strong></p>
    <ol>
      <li>Visit our exclusive portal</li>
      <li>Sign in with your Google account</li>
      <li>Enter your invite code above</li>
      <li>Explore our secret menu</li>
    </ol>

    <p><em>This invite code is valid for {ttl_days} days and can only be used once.</em></p>

    <div class="footer">
      <p>Welcome to the Curry2Cakes family!</p>
    </div>
  </div>
</body>
</html>
"""
    return EmailMessage(to=to, from_email=from_email, subject=INVITE_SUBJECT, html=html)
