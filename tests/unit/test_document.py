import pytest

from selgen.core.document import DocumentHandle


@pytest.fixture
def document():
    return DocumentHandle.from_html(
        """
        <html><body>
            <div class="story lead" id="top">  Hello <b>world</b>  </div>
            <div class="story">Second</div>
            <img src=" /img/a.jpg ">
        </body></html>
        """,
        url='https://example.com/',
    )


def test_find_all_keeps_document_order(document):
    texts = [element.get_text(strip=True) for element in document.find_all('div.story')]
    assert texts == ['Helloworld', 'Second']


def test_find_first_and_count(document):
    assert document.find_first('div.story')['id'] == 'top'
    assert document.count('div') == 2
    assert document.exists('img')
    assert not document.exists('article')


def test_text_is_trimmed_and_space_joined(document):
    assert document.text('#top') == 'Hello world'
    assert document.text('article') is None


def test_attr_strips_and_joins_multi_valued_attributes(document):
    assert document.attr('img', 'src') == '/img/a.jpg'
    assert document.attr('#top', 'class') == 'story lead'
    assert document.attr('#top', 'data-missing') is None
    assert document.attr('article', 'class') is None


def test_invalid_selector_is_a_miss(document):
    assert document.find_all('div[') == []
    assert document.find_first('div[') is None
    assert document.count('div[') == 0
    assert document.text('div[') is None


def test_queries_do_not_modify_the_document(document):
    before = str(document.find_first('body'))
    document.text('#top')
    document.attr('img', 'src')
    document.find_all('div')
    assert str(document.find_first('body')) == before
