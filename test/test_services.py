#!/usr/bin/env python3
import json
import os
import sys
import unittest
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from sms_proxy.config import Config
from sms_proxy.errors import DeliveryError
from sms_proxy.services import DeliveryResult, build_sms_body, send_message

CONFIG = Config(
    phone_numbers=("+1111",),
    url="https://sms.example.com/send",
    username="grafana",
    password="s3cr3t",
)


def _response(status_code, text=""):
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    return resp


class TestBuildSmsBody(unittest.TestCase):
    def test_fixed_keys(self):
        body = build_sms_body("Title: a\nDescription: b", "+1111")
        self.assertEqual(json.loads(body), {"Message": "Title: a\nDescription: b", "PhoneNumber": "+1111"})
        self.assertEqual(body, '{"Message":"Title: a\\nDescription: b","PhoneNumber":"+1111"}')

    def test_keeps_non_ascii(self):
        body = build_sms_body("Memória em 95%", "+1111")
        self.assertIn("Memória", body)


class TestSendMessage(unittest.TestCase):
    @patch('sms_proxy.services.requests.post')
    def test_post_with_credential_headers(self, mock_post):
        mock_post.return_value = _response(200, "queued")

        result = send_message(CONFIG, "hello", "+1111")

        self.assertEqual(result, DeliveryResult(phone_number="+1111", status_code=200, body="queued"))
        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], "https://sms.example.com/send")
        self.assertEqual(kwargs['headers'], {
            "Content-Type": "application/json",
            "UserName": b"grafana",
            "Password": b"s3cr3t",
        })
        self.assertEqual(json.loads(kwargs['data'].decode('utf-8')), {"Message": "hello", "PhoneNumber": "+1111"})
        self.assertNotIn('auth', kwargs)

    @patch('sms_proxy.services.requests.post')
    def test_non_latin1_credentials_sent_as_utf8(self, mock_post):
        mock_post.return_value = _response(200)
        config = Config(url="http://sms.example.com/send", username="josé", password="senha€")

        send_message(config, "hello", "+1111")

        headers = mock_post.call_args[1]['headers']
        self.assertEqual(headers["UserName"], "josé".encode('utf-8'))
        self.assertEqual(headers["Password"], "senha€".encode('utf-8'))
        # requests aceita bytes nos headers sem recodificar em latin-1
        prepared = requests.Request("POST", config.url, headers=headers, data=b"{}").prepare()
        self.assertEqual(prepared.headers["Password"], b"senha\xe2\x82\xac")

    @patch('sms_proxy.services.requests.post')
    def test_no_timeout_by_default(self, mock_post):
        mock_post.return_value = _response(200)
        with patch('sms_proxy.services.OUTBOUND_TIMEOUT_SECONDS', None):
            send_message(CONFIG, "hello", "+1111")
        self.assertIsNone(mock_post.call_args[1]['timeout'])

    @patch('sms_proxy.services.requests.post')
    def test_only_200_is_success(self, mock_post):
        for status in [201, 202, 204, 301, 400, 401, 500, 503]:
            with self.subTest(status=status):
                mock_post.return_value = _response(status, "rejected")
                with self.assertRaises(DeliveryError) as ctx:
                    send_message(CONFIG, "hello", "+1111")
                self.assertEqual(ctx.exception.status_code, status)
                self.assertEqual(ctx.exception.body, "rejected")
                self.assertEqual(ctx.exception.phone_number, "+1111")
                self.assertEqual(str(ctx.exception), f"received non-OK response: {status} rejected")

    @patch('sms_proxy.services.requests.post')
    def test_transport_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(DeliveryError) as ctx:
            send_message(CONFIG, "hello", "+1111")
        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("failed to send HTTP request", str(ctx.exception))

    @patch('sms_proxy.services.requests.post')
    def test_logs_body_but_not_password(self, mock_post):
        mock_post.return_value = _response(200, "ok-from-gateway")
        with self.assertLogs('sms_proxy.services', level='INFO') as logs:
            send_message(CONFIG, "hello", "+1111")
        output = "\n".join(logs.output)
        self.assertIn('"PhoneNumber":"+1111"', output)
        self.assertIn("ok-from-gateway", output)
        self.assertNotIn("s3cr3t", output)


if __name__ == '__main__':
    unittest.main()
