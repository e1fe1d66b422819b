"""Tests for newsletter generation."""
import unittest
from unittest.mock import patch, MagicMock
from newsletter_ai.llm.generator import generate_content

MODEL_OUTPUT = "*Robots Weekly*\n**Factories** ***Automation keeps growing.***\n****robots, industry****"


def create_mock_completion(text):
    """Create a chat completion response carrying `text`."""
    response = MagicMock()
    choice = MagicMock()
    choice.message.content = text
    response.choices = [choice]
    return response


class TestGenerateContent(unittest.TestCase):
    def setUp(self):
        self.scrape_patcher = patch('newsletter_ai.llm.generator.scrape_paragraph_content')
        self.mock_scrape = self.scrape_patcher.start()
        self.mock_scrape.return_value = {
            'status': 200,
            'message': 'Content scraped',
            'content': 'Robots are used in factories.\n'
        }

        self.openai_patcher = patch('newsletter_ai.llm.generator.OpenAI')
        self.mock_openai = self.openai_patcher.start()
        self.mock_client = self.mock_openai.return_value
        self.mock_client.chat.completions.create.return_value = create_mock_completion(MODEL_OUTPUT)

    def tearDown(self):
        self.scrape_patcher.stop()
        self.openai_patcher.stop()

    def test_generate_content_success(self):
        draft = generate_content("Robots", "technology", "https://example.com/robots", "sk-test")

        self.mock_openai.assert_called_once_with(api_key="sk-test")
        self.mock_scrape.assert_called_once_with("https://example.com/robots")
        self.assertEqual(draft['title'], "Robots Weekly")
        self.assertEqual(draft['tag'], "robots, industry")
        self.assertEqual(draft['category'], "technology")
        self.assertEqual(draft['content'], [
            {'subtitle': 'Factories', 'paragraph': 'Automation keeps growing.'}
        ])
        self.assertNotIn('status', draft)

    def test_request_shape(self):
        generate_content("Robots", "technology", "https://example.com/robots", "sk-test")

        kwargs = self.mock_client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs['max_tokens'], 1000)
        self.assertEqual(kwargs['temperature'], 0.1)

        system, user = kwargs['messages']
        self.assertEqual(system['role'], 'system')
        self.assertIn('Robots are used in factories.', system['content'])
        self.assertIn('technology', system['content'])
        self.assertIn('****', system['content'])
        self.assertEqual(user, {'role': 'user', 'content': 'Robots'})

    @patch('newsletter_ai.llm.generator.parse_content')
    def test_ai_failure_returns_result_without_parsing(self, mock_parse):
        self.mock_client.chat.completions.create.side_effect = Exception("Invalid API key")

        result = generate_content("Robots", "technology", "https://example.com/robots", "bad-key")

        self.assertEqual(result, {
            'status': 203,
            'message': 'Content not generated',
            'reason': 'Invalid API key'
        })
        mock_parse.assert_not_called()

    @patch('newsletter_ai.llm.generator.parse_content')
    def test_empty_completion_is_a_failure(self, mock_parse):
        self.mock_client.chat.completions.create.return_value = create_mock_completion(None)

        result = generate_content("Robots", "technology", "https://example.com/robots", "sk-test")

        self.assertEqual(result['status'], 203)
        self.assertEqual(result['message'], 'Content not generated')
        mock_parse.assert_not_called()

    def test_scrape_failure_short_circuits(self):
        failure = {
            'status': 203,
            'message': 'Content not scraped',
            'reason': 'An error occurred: Name or service not known'
        }
        self.mock_scrape.return_value = failure

        result = generate_content("Robots", "technology", "https://bad.invalid", "sk-test")

        self.assertEqual(result, failure)
        self.mock_client.chat.completions.create.assert_not_called()


if __name__ == '__main__':
    unittest.main()
