from textwrap import dedent

import pytest


POST = r"""
<?php

namespace App\Models;

use App\Models\Comment;
use Illuminate\Database\Eloquent\Model;

class Post extends Model
{
	public function comments()
	{
		return $this->hasMany(Comment::class);
	}

	public function author()
	{
		return $this->belongsTo(\App\Models\User::class, 'user_id');
	}
}
"""

COMMENT = r"""
<?php

namespace App\Models;

use Illuminate\Database\Eloquent\Model;

class Comment extends Model
{
	public function post()
	{
		return $this->belongsTo(Post::class);
	}
}
"""

USER = r"""
<?php

namespace App;

use Illuminate\Foundation\Auth\User as Authenticatable;
use App\Models\Post;

class User extends Authenticatable
{
	public function posts(): \Illuminate\Database\Eloquent\Relations\HasMany
	{
		return $this->hasMany(Post::class);
	}
}
"""

HELPERS = r"""
<?php

function money($value)
{
	return number_format($value, 2);
}
"""


def write(root, rel_path, text):
	path = root / rel_path
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(dedent(text).lstrip(), encoding="utf-8")
	return path


@pytest.fixture
def laravel_project(tmp_path):
	write(tmp_path, "app/Models/Post.php", POST)
	write(tmp_path, "app/Models/Comment.php", COMMENT)
	write(tmp_path, "app/User.php", USER)
	write(tmp_path, "app/helpers.php", HELPERS)
	write(tmp_path, "app/Http/Controllers/PostController.php", "<?php\nnamespace App\\Http\\Controllers;\nclass PostController {}\n")
	write(tmp_path, "vendor/laravel/framework/app/Models/Vendor.php", "<?php\nnamespace Vendor;\nclass Vendor {}\n")
	return tmp_path
