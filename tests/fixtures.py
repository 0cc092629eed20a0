"""HTML fixtures shaped like UtaTen search-result and lyric pages."""

SEARCH_HTML = """\
<!DOCTYPE html>
<html><body>
<table class="searchResult">
  <tr>
    <td>
      <p class="searchResult__title"><a href="/lyric/ja12345678/">夜に駆ける</a></p>
      <p class="searchResult__name"><a href="/artist/12345/">YOASOBI</a></p>
    </td>
  </tr>
  <tr>
    <td>
      <p class="searchResult__title"><a href="/lyric/zz00000000/">夜に駆ける (cover)</a></p>
    </td>
  </tr>
</table>
</body></html>
"""

EMPTY_SEARCH_HTML = """\
<!DOCTYPE html>
<html><body>
<p class="searchResult__none">該当する歌詞が見つかりませんでした</p>
</body></html>
"""

LYRIC_HTML = """\
<!DOCTYPE html>
<html>
<head><title>夜に駆ける 歌詞 YOASOBI ふりがな付 - うたてん</title></head>
<body>
<header><nav>site navigation</nav></header>
<main>
<article class="lyricArticle">
  <p class="breadcrumb">ホーム &gt; 歌詞</p>
  <h2 class="newLyricTitle">
    <span class="newLyricTitle__main">夜に駆ける</span><span class="newLyricTitle_afterTxt">の歌詞</span>
  </h2>
  <div class="lyricData">
    <dl class="newLyricWork">
      <dt>歌手</dt>
      <dd><a href="/artist/12345/">YOASOBI</a></dd>
      <dt>作詞</dt>
      <dd><a href="/lyricist/999/">Ayase</a></dd>
      <dt>公式</dt>
      <dd><a href="https://www.yoasobi-music.jp/">yoasobi-music.jp</a></dd>
    </dl>
    <div class="newLyricWorkFooter">
      <ul class="tagList"><li><a href="/tag/1/">アニメ</a></li></ul>
      <button class="shareButton">シェアする</button>
    </div>
  </div>
  <div class="lyricBody">
    <div class="hiragana">
      沈むように<br>溶けてゆくように
    </div>
    <div class="romaji">
      shizumu you ni<br>tokete yuku you ni
    </div>
  </div>
  <aside class="recommend">おすすめ</aside>
</article>
</main>
</body>
</html>
"""

NO_BODY_HTML = """\
<!DOCTYPE html>
<html><body>
<article>
  <h2 class="newLyricTitle">夜に駆ける<span class="newLyricTitle_afterTxt">の歌詞</span></h2>
  <div class="lyricData"><a href="/artist/12345/">YOASOBI</a></div>
</article>
</body></html>
"""
