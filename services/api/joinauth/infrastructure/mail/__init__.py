from .smtp import SMTPMailSender
